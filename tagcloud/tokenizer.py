"""
tokenizer.py - Word Tokenizer

Splits raw text into lowercase words. A word is any run of characters
that are not in SEPARATORS; letters and the apostrophe are word characters.
"""

SEPARATORS = frozenset(
    "0123456789"
    "`~!@#$%^&*()+=[]{}|\\:;\"<,>.?/-"
    "\t\n\r "
)


def tokenize_lines(lines, separators=SEPARATORS):
    """
    Runtime Complexity: O(n)
    where n is the total number of characters across lines.
    Each character is inspected once; lower-casing happens once per word.

    The word buffer carries across line boundaries, so a word only ends
    on a separator character or at the end of the input.
    """
    buffer = []
    for line in lines:
        for char in line:
            if char in separators:
                if buffer:
                    yield "".join(buffer).lower()
                    buffer = []
            else:
                buffer.append(char)

    if buffer:
        yield "".join(buffer).lower()


def tokenize(text, separators=SEPARATORS):
    """Tokenize a single string."""
    return tokenize_lines((text,), separators)


class Tokens(object):
    """Restartable token sequence: every iteration rescans the same text."""

    def __init__(self, text, separators=SEPARATORS):
        self.text = text
        self.separators = separators

    def __iter__(self):
        return tokenize(self.text, self.separators)
