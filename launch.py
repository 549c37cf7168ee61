"""
launch.py - Tag Cloud Generator Entry Point

Reads a .txt file and writes an HTML tag cloud of its most frequent words.
Anything not given on the command line is asked for interactively;
an empty answer to the size prompt uses DEFAULTSIZE from the config.

Usage:
    python launch.py                                  # Prompt for everything
    python launch.py --input a.txt --output a.html --size 50
    python launch.py --config_file path               # Use custom config file
"""

import sys
from configparser import ConfigParser, Error as ConfigParserError
from argparse import ArgumentParser

from utils import get_logger
from utils.config import Config
from tagcloud import TagCloudGenerator


def _ask(prompt, value, read=input):
    """Return value if given, otherwise prompt for it."""
    if value is not None:
        return value
    print(prompt)
    return read().strip()


def main(config_file, input_path=None, output_path=None, size=None, read=input):
    """
    Build a tag cloud, prompting for any missing arguments.

    Args:
        config_file: Path to configuration file (default: config.ini)
        input_path: Source .txt file
        output_path: Destination .html file
        size: Number of words in the cloud
        read: Line reader used for prompts (for testing)

    Returns:
        Process exit status: 0 on success, 1 on a rejected request or I/O error
    """
    logger = get_logger("LAUNCH")

    cparser = ConfigParser()
    try:
        cparser.read(config_file)
        config = Config(cparser)
    except (ValueError, ConfigParserError) as e:
        logger.error(f"Bad configuration in {config_file}: {e}")
        return 1

    input_path = _ask("Enter path to input file name:", input_path, read)
    output_path = _ask("Enter path to output file name:", output_path, read)
    size = _ask("Enter number of words to include in cloud:", size, read)
    if size == "":
        size = config.default_size

    generator = TagCloudGenerator(config)
    try:
        generator.generate(input_path, output_path, size)
    except ValueError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"Could not generate tag cloud: {e}")
        return 1
    return 0


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--input", type=str, default=None,
                        help="Path to the .txt file to read")
    parser.add_argument("--output", type=str, default=None,
                        help="Path to the .html file to write")
    parser.add_argument("--size", type=str, default=None,
                        help="Number of words to include in the cloud")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    args = parser.parse_args()
    sys.exit(main(args.config_file, args.input, args.output, args.size))
