"""
ranking.py - Top-N Selection and Display Ordering

Two independent stages: selection ranks by count (highest first, ties
broken by the alphabetically earlier word) and keeps the first N; display
ordering then sorts only the kept entries by word. Folding both into one
sort would change which words are kept when N is smaller than the
vocabulary.
"""

from typing import Dict, Iterable, List, NamedTuple


class RankedEntry(NamedTuple):
    word: str
    count: int


def get_selection_key(entry):
    """Count descending, then word ascending."""
    return (-entry.count, entry.word)


def get_display_key(entry):
    return entry.word.lower()


def select_top(frequencies: Dict[str, int], size: int) -> List[RankedEntry]:
    """
    Runtime Complexity: O(n log n) where n is the number of distinct words.

    Returns min(size, len(frequencies)) entries in selection order.
    size is assumed positive; callers validate it.
    """
    entries = [RankedEntry(word, count) for word, count in frequencies.items()]
    entries.sort(key=get_selection_key)
    return entries[:size]


def display_order(entries: Iterable[RankedEntry]) -> List[RankedEntry]:
    """Alphabetical (case-folded) order; count plays no part."""
    return sorted(entries, key=get_display_key)
