"""
Unit tests for the sentiment lexicon.
"""

import pytest

from src.errors import IndexOutOfRange
from src.models.sentiment import Sentiment
from src.registry.lexicon import Lexicon, build_word_list


def test_build_word_list_lowercases_and_sorts():
    """Raw words are lowercased and sorted once."""
    view = build_word_list(["Nice", "GREAT", "amazing"])

    assert list(view) == ["amazing", "great", "nice"]


def test_build_word_list_keeps_duplicates():
    view = build_word_list(["good", "Good", "fine"])
    assert list(view) == ["fine", "good", "good"]


def test_classify():
    lexicon = Lexicon.build(["great", "nice"], ["bad", "rude"])

    assert lexicon.classify("great") is Sentiment.POSITIVE
    assert lexicon.classify("rude") is Sentiment.NEGATIVE
    assert lexicon.classify("hotel") is Sentiment.NEUTRAL
    assert lexicon.classify("") is Sentiment.NEUTRAL


def test_positive_wins_when_word_in_both_lists():
    """A word listed on both sides classifies as Positive."""
    lexicon = Lexicon.build(["fine", "great"], ["bad", "fine"])

    assert lexicon.classify("fine") is Sentiment.POSITIVE


def test_index_lookups():
    lexicon = Lexicon.build(["nice", "great"], ["bad"])

    index = lexicon.positive_index("nice")
    assert index == 1
    assert lexicon.word(Sentiment.POSITIVE, index) == "nice"
    assert lexicon.negative_index("bad") == 0
    assert lexicon.negative_index("nice") is None


def test_word_out_of_range():
    lexicon = Lexicon.build(["great"], ["bad"])

    with pytest.raises(IndexOutOfRange):
        lexicon.word(Sentiment.NEGATIVE, 5)

    with pytest.raises(ValueError):
        lexicon.word_list(Sentiment.NEUTRAL)


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
