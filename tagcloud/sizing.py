"""
sizing.py - Count to Font Size Scaling

Font sizes scale linearly between MIN_FONT and MAX_FONT against the
smallest and largest counts of the selected entries only.
"""

from typing import Iterable, List, NamedTuple, Tuple

from tagcloud.ranking import RankedEntry

MIN_FONT = 10
MAX_FONT = 48


class TagCloudEntry(NamedTuple):
    word: str
    count: int
    font_size: int


def count_range(entries: Iterable[RankedEntry], zero_floor: bool = False) -> Tuple[int, int]:
    """
    Smallest and largest count over entries; (0, 0) when there are none.

    With zero_floor the minimum is clamped to 0, matching generators that
    start their running minimum at 0 rather than at the first count.
    """
    counts = [entry.count for entry in entries]
    if not counts:
        return 0, 0
    sel_min = min(counts)
    if zero_floor:
        sel_min = min(0, sel_min)
    return sel_min, max(counts)


def font_size(count: int, sel_min: int, sel_max: int,
              min_font: int = MIN_FONT, max_font: int = MAX_FONT) -> int:
    if sel_max == sel_min:
        return min_font
    return min_font + (max_font - min_font) * (count - sel_min) // (sel_max - sel_min)


def assign_font_sizes(entries: Iterable[RankedEntry], min_font: int = MIN_FONT,
                      max_font: int = MAX_FONT, zero_floor: bool = False) -> List[TagCloudEntry]:
    """Attach a font size to each entry, preserving the input order."""
    entries = list(entries)
    sel_min, sel_max = count_range(entries, zero_floor)
    return [
        TagCloudEntry(entry.word, entry.count,
                      font_size(entry.count, sel_min, sel_max, min_font, max_font))
        for entry in entries
    ]
