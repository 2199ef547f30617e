"""
Batch Analyzer.

Runs the lexicon over every review and accumulates corpus-wide match
records for frequency reporting and the summary.
"""

import logging
import time
from typing import Callable, List, Optional, Tuple

from src.agents.normalization import lowercase, tokenize
from src.containers.ordered_collection import OrderedCollection
from src.models.review import Review
from src.models.sentiment import CorpusSummary, MatchRecord, Sentiment
from src.registry.lexicon import Lexicon

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class BatchAnalyzer:
    """
    Counts lexicon matches across the whole review set.

    Tokens are lowercased only; punctuation is kept, so "great!" does not
    match "great" here. Both word lists are queried independently for
    every token.
    """

    def __init__(self, lexicon: Lexicon):
        """
        Args:
            lexicon: Built lexicon, read-only during the pass
        """
        self.lexicon = lexicon
        self.matches = MatchRecord()
        self.elapsed_milliseconds = 0

    def analyze_review(self, review: Review, matches: MatchRecord) -> None:
        """Record the lexicon index of every matching token of one review."""
        for token in tokenize(review.text):
            word = lowercase(token)

            positive_index = self.lexicon.positive_index(word)
            negative_index = self.lexicon.negative_index(word)

            if positive_index is not None:
                matches.record(Sentiment.POSITIVE, positive_index)
            if negative_index is not None:
                matches.record(Sentiment.NEGATIVE, negative_index)

    def analyze_all(
        self,
        reviews: OrderedCollection,
        on_progress: Optional[ProgressCallback] = None
    ) -> MatchRecord:
        """
        Analyze every review in order.

        Match records from any earlier pass are replaced.

        Args:
            reviews: Collection of Review objects
            on_progress: Called with (review ordinal, total reviews)
                before each review

        Returns:
            Corpus-wide MatchRecord
        """
        start = time.perf_counter()
        matches = MatchRecord()
        total = reviews.size()

        for review in reviews:
            if on_progress:
                on_progress(review.ordinal, total)
            self.analyze_review(review, matches)

        self.matches = matches
        self.elapsed_milliseconds = int((time.perf_counter() - start) * 1000)

        logger.info(
            f"Batch pass over {total} reviews: "
            f"{matches.match_count(Sentiment.POSITIVE)} positive, "
            f"{matches.match_count(Sentiment.NEGATIVE)} negative matches "
            f"in {self.elapsed_milliseconds} ms"
        )
        return matches

    def frequency(self, polarity: Sentiment, index: int) -> int:
        """How many times a lexicon index was matched in the last pass."""
        return self.matches.frequency(polarity, index)

    def word_frequencies(self, polarity: Sentiment) -> List[Tuple[str, int]]:
        """
        (word, count) pairs in lexicon order, for words matched at least once.
        """
        frequencies = []
        for index, word in enumerate(self.lexicon.word_list(polarity)):
            count = self.frequency(polarity, index)
            if count > 0:
                frequencies.append((word, count))
        return frequencies

    def summarize(self, reviews: OrderedCollection) -> CorpusSummary:
        """Totals of the last pass."""
        return CorpusSummary(
            total_reviews=reviews.size(),
            total_words=sum(review.word_count for review in reviews),
            positive_match_count=self.matches.match_count(Sentiment.POSITIVE),
            negative_match_count=self.matches.match_count(Sentiment.NEGATIVE),
            elapsed_milliseconds=self.elapsed_milliseconds
        )
