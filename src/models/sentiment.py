"""
Sentiment result models.

Per-review scores, single-review reports, corpus-wide match records
and the corpus summary.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from src.containers.ordered_collection import OrderedCollection


class Sentiment(Enum):
    """Polarity of a word or a review."""
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class ReviewScore:
    """
    Lexicon matches found in one review.
    Matched words are kept in encounter order, duplicates included.
    """
    positive_count: int = 0
    negative_count: int = 0
    positive_words: List[str] = field(default_factory=list)
    negative_words: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ReviewAnalysis:
    """Everything the single-review report shows."""
    ordinal: int
    text: str
    positive_count: int
    positive_words: List[str]
    negative_count: int
    negative_words: List[str]
    score: float  # Continuous score in [1, 5]
    rounded_score: int
    sentiment: Sentiment
    user_rating: int
    elapsed_microseconds: int

    def to_dict(self) -> Dict:
        """Flatten for tabular export."""
        return {
            "review": self.ordinal,
            "positive_count": self.positive_count,
            "negative_count": self.negative_count,
            "score": round(self.score, 4),
            "rounded_score": self.rounded_score,
            "sentiment": self.sentiment.label,
            "user_rating": self.user_rating,
        }


@dataclass
class MatchRecord:
    """
    Corpus-wide multiset of matched lexicon indices, split by polarity.

    The index collections keep every match in encounter order; the
    histograms answer frequency queries in O(1).
    """
    positive_indices: OrderedCollection = field(default_factory=OrderedCollection)
    negative_indices: OrderedCollection = field(default_factory=OrderedCollection)
    positive_histogram: Counter = field(default_factory=Counter)
    negative_histogram: Counter = field(default_factory=Counter)

    def record(self, polarity: Sentiment, index: int) -> None:
        if polarity is Sentiment.POSITIVE:
            self.positive_indices.append(index)
            self.positive_histogram[index] += 1
        elif polarity is Sentiment.NEGATIVE:
            self.negative_indices.append(index)
            self.negative_histogram[index] += 1
        else:
            raise ValueError(f"Cannot record a match with polarity {polarity}")

    def frequency(self, polarity: Sentiment, index: int) -> int:
        histogram = self._histogram(polarity)
        return histogram[index]

    def match_count(self, polarity: Sentiment) -> int:
        if polarity is Sentiment.POSITIVE:
            return self.positive_indices.size()
        if polarity is Sentiment.NEGATIVE:
            return self.negative_indices.size()
        raise ValueError(f"No matches are recorded for polarity {polarity}")

    def _histogram(self, polarity: Sentiment) -> Counter:
        if polarity is Sentiment.POSITIVE:
            return self.positive_histogram
        if polarity is Sentiment.NEGATIVE:
            return self.negative_histogram
        raise ValueError(f"No matches are recorded for polarity {polarity}")


@dataclass(frozen=True)
class CorpusSummary:
    """Totals shown by the summary report."""
    total_reviews: int
    total_words: int
    positive_match_count: int
    negative_match_count: int
    elapsed_milliseconds: int
