"""
counter.py - Word Frequency Counting
"""

from collections import Counter
from typing import Dict, Iterable


def compute_word_frequencies(tokens: Iterable[str]) -> Dict[str, int]:
    """
    Tally how often each token occurs.

    Consumes tokens once; the counts add up to the number of tokens seen.
    """
    return dict(Counter(tokens))
