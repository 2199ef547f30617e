"""
Tokenizer and normalizer.

Splits review text into raw whitespace tokens and reduces tokens to the
forms used for lexicon matching.

Two normalizations exist on purpose:
- normalize(): lowercase, alphanumeric only (single-review scoring)
- lowercase(): lowercase only, punctuation kept (batch frequency pass)
They decide which words count as matches, so they are not interchangeable.
"""

import re
from typing import Iterator

_WHITESPACE_TOKEN = re.compile(r"\S+")


class Tokens:
    """
    Lazy, restartable sequence of raw whitespace-separated tokens.

    Each iteration scans the text again from the start.
    """

    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Iterator[str]:
        for match in _WHITESPACE_TOKEN.finditer(self.text):
            yield match.group()

    def __repr__(self) -> str:
        return f"Tokens({self.text[:30]!r})"


def tokenize(text: str) -> Tokens:
    """Split text on whitespace. Tokens are not normalized."""
    return Tokens(text)


def normalize(word: str) -> str:
    """
    Keep only alphanumeric characters, lowercased.

    "Great!" -> "great", "--" -> "" (matches nothing).
    """
    return "".join(c for c in word if c.isalnum()).lower()


def lowercase(word: str) -> str:
    """Lowercase only. "Great!" -> "great!"."""
    return word.lower()


def count_words(text: str) -> int:
    """Number of whitespace-separated tokens."""
    return sum(1 for _ in _WHITESPACE_TOKEN.finditer(text))
