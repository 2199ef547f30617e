"""
Ingestion Agent.

Loads the positive/negative word lists and the review CSV from disk.
"""

import csv
import logging
from pathlib import Path
from typing import Iterator, List, Tuple, Union

import config.settings as settings
from src.agents.normalization import count_words
from src.containers.ordered_collection import OrderedCollection
from src.errors import MalformedRecord, SourceUnavailable
from src.models.review import Review

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _open_source(path: PathLike, encoding: str):
    try:
        return open(path, "r", encoding=encoding, errors="replace", newline="")
    except OSError as e:
        raise SourceUnavailable(str(path), e.strerror or str(e)) from e


def read_word_tokens(
    path: PathLike,
    comment_prefix: str = settings.LEXICON_COMMENT_PREFIX,
    encoding: str = settings.SOURCE_ENCODING
) -> Iterator[str]:
    """
    Yield whitespace-separated word tokens from a word-list file.

    Lines starting with comment_prefix are skipped.

    Raises:
        SourceUnavailable: If the file cannot be opened
    """
    with _open_source(path, encoding) as f:
        for line in f:
            stripped = line.strip()
            if not stripped:
                continue
            if comment_prefix and stripped.startswith(comment_prefix):
                continue
            yield from stripped.split()


def load_words(
    path: PathLike,
    comment_prefix: str = settings.LEXICON_COMMENT_PREFIX,
    encoding: str = settings.SOURCE_ENCODING
) -> List[str]:
    """Read every word token of a word-list file."""
    words = list(read_word_tokens(path, comment_prefix, encoding))
    logger.info(f"Loaded {len(words)} words from {path}")
    return words


def parse_review_line(line: str, line_number: int) -> Tuple[str, int]:
    """
    Parse one CSV line into (review text, rating).

    The review may be double-quoted and contain commas.

    Raises:
        MalformedRecord: On unbalanced quotes, wrong field count or
            a non-integer rating
    """
    if line.count('"') % 2 != 0:
        raise MalformedRecord(line_number, "unbalanced quotes")

    try:
        fields = next(csv.reader([line], strict=True))
    except (csv.Error, StopIteration) as e:
        raise MalformedRecord(line_number, f"unparseable CSV ({e})") from e

    if len(fields) != 2:
        raise MalformedRecord(line_number, f"expected 2 fields, got {len(fields)}")

    text, rating_field = fields
    try:
        rating = int(rating_field.strip())
    except ValueError as e:
        raise MalformedRecord(line_number, f"invalid rating {rating_field!r}") from e

    if not text.strip():
        raise MalformedRecord(line_number, "empty review text")

    return text, rating


class IngestionAgent:
    """
    Loads reviews from a CSV file of `review,rating` rows.

    The first line is always a header and is discarded. Rows that fail to
    parse are skipped and counted in `skipped_rows`.
    """

    def __init__(self, encoding: str = settings.SOURCE_ENCODING):
        """
        Initialize ingestion agent.

        Args:
            encoding: Text encoding of the source files
        """
        self.encoding = encoding
        self.skipped_rows = 0

    def load_reviews(self, path: PathLike) -> OrderedCollection:
        """
        Load all well-formed reviews.

        Args:
            path: Path to the review CSV

        Returns:
            OrderedCollection of Review objects, ordinals starting at 1

        Raises:
            SourceUnavailable: If the file cannot be opened
        """
        reviews: OrderedCollection = OrderedCollection()
        self.skipped_rows = 0

        with _open_source(path, self.encoding) as f:
            for line_number, line in enumerate(f, start=1):
                if line_number == 1:
                    continue

                line = line.rstrip("\r\n")
                if not line.strip():
                    continue

                try:
                    text, rating = parse_review_line(line, line_number)
                except MalformedRecord as e:
                    self.skipped_rows += 1
                    logger.debug(f"Skipping row: {e}")
                    continue

                reviews.append(Review(
                    ordinal=reviews.size() + 1,
                    text=text,
                    rating=rating,
                    word_count=count_words(text)
                ))

        logger.info(
            f"Loaded {reviews.size()} reviews from {path} "
            f"({self.skipped_rows} malformed rows skipped)"
        )
        return reviews

    def load_word_lists(
        self,
        positive_path: PathLike,
        negative_path: PathLike
    ) -> Tuple[List[str], List[str]]:
        """Load the positive and negative word lists."""
        return (
            load_words(positive_path, encoding=self.encoding),
            load_words(negative_path, encoding=self.encoding)
        )
