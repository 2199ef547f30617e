"""
Sentiment Lexicon - positive and negative word lists.

Each list is built once, sorted once and then only queried.
"""

import logging
from typing import Iterable, Optional

import config.settings as settings
from src.containers.ordered_collection import OrderedCollection, SortedView
from src.models.sentiment import Sentiment

logger = logging.getLogger(__name__)


def build_word_list(
    words: Iterable[str],
    initial_capacity: int = settings.INITIAL_CAPACITY
) -> SortedView:
    """
    Lowercase every raw word, collect and sort.

    Duplicates are kept.

    Args:
        words: Raw word tokens
        initial_capacity: Starting capacity of the backing collection

    Returns:
        Sorted, frozen word list
    """
    collection: OrderedCollection = OrderedCollection(initial_capacity)
    for word in words:
        collection.append(word.lower())
    return collection.sort_ascending()


class Lexicon:
    """
    Positive and negative word lists.

    A word present in both lists classifies as Positive.
    """

    def __init__(self, positive: SortedView, negative: SortedView):
        """
        Args:
            positive: Sorted positive word list
            negative: Sorted negative word list
        """
        self.positive = positive
        self.negative = negative

    @classmethod
    def build(
        cls,
        positive_words: Iterable[str],
        negative_words: Iterable[str],
        initial_capacity: int = settings.INITIAL_CAPACITY
    ) -> "Lexicon":
        """Build both word lists from raw tokens."""
        lexicon = cls(
            positive=build_word_list(positive_words, initial_capacity),
            negative=build_word_list(negative_words, initial_capacity)
        )
        logger.info(
            f"Built lexicon: {lexicon.positive.size()} positive, "
            f"{lexicon.negative.size()} negative words"
        )
        return lexicon

    def classify(self, word: str) -> Sentiment:
        """
        Classify a normalized word.

        Positive list is checked first, then negative.
        """
        if self.positive.lookup(word) is not None:
            return Sentiment.POSITIVE
        if self.negative.lookup(word) is not None:
            return Sentiment.NEGATIVE
        return Sentiment.NEUTRAL

    def positive_index(self, word: str) -> Optional[int]:
        return self.positive.lookup(word)

    def negative_index(self, word: str) -> Optional[int]:
        return self.negative.lookup(word)

    def word_list(self, polarity: Sentiment) -> SortedView:
        if polarity is Sentiment.POSITIVE:
            return self.positive
        if polarity is Sentiment.NEGATIVE:
            return self.negative
        raise ValueError(f"Lexicon has no word list for {polarity}")

    def word(self, polarity: Sentiment, index: int) -> str:
        """Word at a lexicon index (raises IndexOutOfRange)."""
        return self.word_list(polarity).get(index)
