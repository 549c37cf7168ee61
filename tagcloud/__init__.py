"""
tagcloud/__init__.py - Tag Cloud Pipeline

Ties the stages together:
- tokenizer: text -> lowercase words
- counter: words -> frequency table
- ranking: table -> top N by count, then alphabetical display order
- sizing: selected entries -> font sizes
- renderer: sized entries -> HTML page

Key role: the only place that knows the order of the stages
"""

from utils import get_logger
from tagcloud.counter import compute_word_frequencies
from tagcloud.ranking import RankedEntry, select_top, display_order
from tagcloud.renderer import write_tag_cloud
from tagcloud.sizing import MIN_FONT, MAX_FONT, TagCloudEntry, assign_font_sizes
from tagcloud.tokenizer import tokenize, tokenize_lines, Tokens
from tagcloud.validation import parse_cloud_size, validate_input_path, validate_output_path

__all__ = [
    "MAX_FONT", "MIN_FONT", "RankedEntry", "TagCloudEntry", "TagCloudGenerator",
    "Tokens", "build_tag_cloud", "compute_word_frequencies", "display_order",
    "select_top", "tokenize", "tokenize_lines",
]


def build_tag_cloud(tokens, size, min_font=MIN_FONT, max_font=MAX_FONT, zero_floor=False):
    """
    Run the counting, selection, ordering and sizing stages over tokens.

    Returns:
        List of TagCloudEntry in alphabetical display order
    """
    frequencies = compute_word_frequencies(tokens)
    selected = select_top(frequencies, size)
    return assign_font_sizes(display_order(selected), min_font, max_font, zero_floor)


class TagCloudGenerator(object):
    """
    Runs one text file through the pipeline and writes the HTML page.
    """

    def __init__(self, config, renderer=write_tag_cloud):
        """
        Args:
            config: Config object (font bounds, zero floor, stylesheets)
            renderer: Callable writing the page (for testing)
        """
        self.config = config
        self.logger = get_logger("TAGCLOUD")
        self.renderer = renderer

    def cloud_from_file(self, input_path, size):
        """Read input_path once and return its display-ordered entries."""
        with open(input_path, "r", encoding="utf-8", errors="ignore") as file:
            return build_tag_cloud(
                tokenize_lines(file), size,
                self.config.min_font, self.config.max_font, self.config.zero_floor)

    def generate(self, input_path, output_path, size):
        """
        Validate the request, build the cloud and write it to output_path.

        Raises:
            ValueError: If the size or either path fails validation
            OSError: If the input cannot be read or the output cannot be written
        """
        validate_input_path(input_path)
        validate_output_path(output_path)
        size = parse_cloud_size(size)

        entries = self.cloud_from_file(input_path, size)
        if len(entries) < size:
            self.logger.info(
                f"{input_path} has only {len(entries)} distinct words, "
                f"fewer than the requested {size}.")

        self.renderer(output_path, entries, size, input_path,
                      self.config.stylesheets)
        self.logger.info(f"Wrote {len(entries)} words from {input_path} to {output_path}.")
        return entries
