"""
Unit tests for the Ingestion Agent.
"""

import os
import tempfile

import pytest

from src.agents.ingestion import IngestionAgent, load_words, parse_review_line
from src.errors import MalformedRecord, SourceUnavailable


def test_load_words_skips_comments(source_files):
    words = load_words(source_files["positive"])
    assert words == ["great", "nice", "clean", "friendly"]


def test_load_words_splits_on_whitespace():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "words.txt")
        with open(path, "w") as f:
            f.write("good  great\n\n  Nice\tfine\n")

        assert load_words(path) == ["good", "great", "Nice", "fine"]


def test_missing_word_list():
    with tempfile.TemporaryDirectory() as tmpdir:
        missing = os.path.join(tmpdir, "nope.txt")
        with pytest.raises(SourceUnavailable, match="Failed to open file"):
            load_words(missing)


def test_parse_quoted_review():
    text, rating = parse_review_line('"nice hotel, expensive parking",4', 2)
    assert text == "nice hotel, expensive parking"
    assert rating == 4


def test_parse_unquoted_review():
    assert parse_review_line("ok nothing special,2", 2) == ("ok nothing special", 2)


def test_parse_escaped_quotes():
    text, _ = parse_review_line('"He said ""wow"" great",5', 2)
    assert text == 'He said "wow" great'


@pytest.mark.parametrize("line", [
    '"unbalanced quote row,3',
    "too,many,fields,4",
    '"rating is not a number",five',
    "no rating at all",
    '"",3',
])
def test_parse_malformed_rows(line):
    with pytest.raises(MalformedRecord):
        parse_review_line(line, 7)


def test_load_reviews_skips_header_and_malformed_rows(source_files):
    """Unbalanced-quote row is skipped and excluded from the count."""
    agent = IngestionAgent()
    reviews = agent.load_reviews(source_files["reviews"])

    assert reviews.size() == 4
    assert agent.skipped_rows == 1

    first = reviews.get(0)
    assert first.ordinal == 1
    assert first.text == "This is a great and nice place, not bad at all"
    assert first.rating == 4
    assert first.word_count == 11

    assert [r.ordinal for r in reviews] == [1, 2, 3, 4]
    assert reviews.get(2).text == "nothing to say here"


def test_load_reviews_header_only():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "reviews.csv")
        with open(path, "w") as f:
            f.write("Review,Rating\n")

        reviews = IngestionAgent().load_reviews(path)
        assert reviews.size() == 0


def test_load_reviews_blank_lines_ignored():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "reviews.csv")
        with open(path, "w") as f:
            f.write("Review,Rating\n\ngreat,5\n\r\n")

        agent = IngestionAgent()
        reviews = agent.load_reviews(path)
        assert reviews.size() == 1
        assert agent.skipped_rows == 0


def test_missing_review_source():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(SourceUnavailable):
            IngestionAgent().load_reviews(os.path.join(tmpdir, "missing.csv"))


def test_load_word_lists(source_files):
    positive, negative = IngestionAgent().load_word_lists(
        source_files["positive"], source_files["negative"]
    )
    assert "great" in positive
    assert negative == ["bad", "dirty", "rude"]


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
