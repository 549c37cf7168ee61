"""
utils/__init__.py - Shared Helpers

Logger construction used by the tag cloud generator and its launcher.
"""

import os
import logging

LOG_DIR = "Logs"


def get_logger(name, filename=None):
    """
    Build (or fetch) a named logger writing to Logs/<filename>.log and stdout.

    Args:
        name: Logger name shown in each record
        filename: Log file stem (defaults to name)
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return logger

    if not os.path.exists(LOG_DIR):
        os.makedirs(LOG_DIR)
    fh = logging.FileHandler(f"{LOG_DIR}/{filename if filename else name}.log")
    fh.setLevel(logging.DEBUG)
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    fh.setFormatter(formatter)
    ch.setFormatter(formatter)
    logger.addHandler(fh)
    logger.addHandler(ch)
    return logger
