"""
Unit tests for the batch analyzer.
"""

import pytest

from src.agents.aggregation import BatchAnalyzer
from src.containers.ordered_collection import OrderedCollection
from src.models.review import Review
from src.models.sentiment import Sentiment
from src.registry.lexicon import Lexicon


def make_reviews(*texts):
    return OrderedCollection.from_iterable(
        Review(ordinal=i, text=text, rating=3, word_count=len(text.split()))
        for i, text in enumerate(texts, start=1)
    )


def test_analyze_all_counts_frequencies(lexicon):
    reviews = make_reviews("great great nice", "bad nice", "nothing here")
    analyzer = BatchAnalyzer(lexicon)

    matches = analyzer.analyze_all(reviews)

    great = lexicon.positive_index("great")
    nice = lexicon.positive_index("nice")
    bad = lexicon.negative_index("bad")

    assert analyzer.frequency(Sentiment.POSITIVE, great) == 2
    assert analyzer.frequency(Sentiment.POSITIVE, nice) == 2
    assert analyzer.frequency(Sentiment.NEGATIVE, bad) == 1
    assert matches.match_count(Sentiment.POSITIVE) == 4
    assert matches.match_count(Sentiment.NEGATIVE) == 1


def test_batch_pass_keeps_punctuation(lexicon):
    """Lowercase-only matching: "Great" counts, "great!" does not."""
    analyzer = BatchAnalyzer(lexicon)
    analyzer.analyze_all(make_reviews("Great hotel, great!"))

    assert analyzer.word_frequencies(Sentiment.POSITIVE) == [("great", 1)]


def test_word_in_both_lists_recorded_on_both_sides():
    lexicon = Lexicon.build(["fine"], ["fine", "bad"])
    analyzer = BatchAnalyzer(lexicon)

    analyzer.analyze_all(make_reviews("fine"))

    assert analyzer.word_frequencies(Sentiment.POSITIVE) == [("fine", 1)]
    assert analyzer.word_frequencies(Sentiment.NEGATIVE) == [("fine", 1)]


def test_word_frequencies_in_lexicon_order(lexicon):
    """Only matched words are listed, in sorted lexicon order."""
    analyzer = BatchAnalyzer(lexicon)
    analyzer.analyze_all(make_reviews("nice nice great", "nice"))

    assert analyzer.word_frequencies(Sentiment.POSITIVE) == [("great", 1), ("nice", 3)]
    assert analyzer.word_frequencies(Sentiment.NEGATIVE) == []


def test_rerun_replaces_previous_matches(lexicon):
    analyzer = BatchAnalyzer(lexicon)
    reviews = make_reviews("great")

    analyzer.analyze_all(reviews)
    analyzer.analyze_all(reviews)

    assert analyzer.matches.match_count(Sentiment.POSITIVE) == 1


def test_progress_callback(lexicon):
    calls = []
    analyzer = BatchAnalyzer(lexicon)

    analyzer.analyze_all(make_reviews("a", "b", "c"), on_progress=lambda n, total: calls.append((n, total)))

    assert calls == [(1, 3), (2, 3), (3, 3)]


def test_summarize(lexicon):
    reviews = make_reviews("great place", "bad bad service here")
    analyzer = BatchAnalyzer(lexicon)
    analyzer.analyze_all(reviews)

    summary = analyzer.summarize(reviews)

    assert summary.total_reviews == 2
    assert summary.total_words == 6
    assert summary.positive_match_count == 1
    assert summary.negative_match_count == 2
    assert summary.elapsed_milliseconds >= 0


def test_frequency_before_any_pass(lexicon):
    analyzer = BatchAnalyzer(lexicon)
    assert analyzer.frequency(Sentiment.POSITIVE, 0) == 0


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
