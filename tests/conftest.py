"""
Shared fixtures: small lexicon and source files on disk.
"""

import os

import pytest

from src.registry.lexicon import Lexicon

POSITIVE_WORDS = "; comment line\ngreat\nnice\nclean\nfriendly\n"
NEGATIVE_WORDS = "; comment line\nbad\ndirty\nrude\n"
REVIEWS_CSV = (
    "Review,Rating\n"
    "\"This is a great and nice place, not bad at all\",4\n"
    "\"dirty room, rude staff\",1\n"
    "\"unbalanced quote row,3\n"
    "nothing to say here,3\n"
    "\"clean and friendly, great stay\",5\n"
)


@pytest.fixture
def lexicon():
    return Lexicon.build(["great", "nice"], ["bad"])


@pytest.fixture
def source_files(tmp_path):
    """Write word lists and a review CSV, return their paths."""
    paths = {
        "positive": tmp_path / "positive-words.txt",
        "negative": tmp_path / "negative-words.txt",
        "reviews": tmp_path / "reviews.csv",
    }
    paths["positive"].write_text(POSITIVE_WORDS, encoding="utf-8")
    paths["negative"].write_text(NEGATIVE_WORDS, encoding="utf-8")
    paths["reviews"].write_text(REVIEWS_CSV, encoding="utf-8")
    return {name: os.fspath(path) for name, path in paths.items()}


@pytest.fixture
def scripted_input():
    """Factory for input() replacements that replay answers, then raise EOFError."""
    def make(answers):
        remaining = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        return fake_input

    return make
