"""
Unit tests for the tokenizer and normalizer.
"""

import pytest

from src.agents.normalization import count_words, lowercase, normalize, tokenize


def test_normalize_strips_punctuation_and_lowercases():
    assert normalize("Great!") == "great"
    assert normalize("place,") == "place"
    assert normalize("Wi-Fi") == "wifi"
    assert normalize("20th") == "20th"


def test_normalize_all_punctuation_is_empty():
    """All-punctuation tokens normalize to the empty string."""
    assert normalize("--") == ""
    assert normalize("...!?") == ""


def test_lowercase_keeps_punctuation():
    assert lowercase("Great!") == "great!"
    assert lowercase("BAD") == "bad"


def test_tokenize_splits_on_whitespace():
    tokens = tokenize("  nice hotel,\texpensive\nparking  ")
    assert list(tokens) == ["nice", "hotel,", "expensive", "parking"]


def test_tokenize_is_restartable():
    """Iterating twice yields the same tokens."""
    tokens = tokenize("one two three")
    assert list(tokens) == list(tokens) == ["one", "two", "three"]


def test_tokenize_empty_text():
    assert list(tokenize("")) == []
    assert list(tokenize("   ")) == []


def test_count_words():
    assert count_words("This is a great and nice place, not bad at all") == 11
    assert count_words("") == 0


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
