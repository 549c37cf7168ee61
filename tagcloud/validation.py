"""
validation.py - Request Checks

Everything here runs before the pipeline; the pipeline itself assumes a
positive size and a readable text file.
"""

import os


def parse_cloud_size(value):
    """
    Convert a user-supplied word count into a positive int.

    Raises:
        ValueError: If value is not an integer or is less than 1
    """
    if isinstance(value, bool):
        raise ValueError("Not a valid integer")
    if isinstance(value, int):
        size = value
    else:
        try:
            size = int(str(value).strip())
        except ValueError:
            raise ValueError("Not a valid integer") from None
    if size < 1:
        raise ValueError("Tag cloud size must be greater than 0.")
    return size


def _has_extension(path, extension):
    stem, ext = os.path.splitext(os.path.basename(path or ""))
    return ext == extension and bool(stem)


def validate_input_path(path):
    if not _has_extension(path, ".txt"):
        raise ValueError("Input should be a .txt file.")
    return path


def validate_output_path(path):
    if not _has_extension(path, ".html"):
        raise ValueError("Output should be a .html file.")
    return path
