"""
Scoring Engine.

Counts lexicon matches in a single review and turns the positive/negative
balance into a 1-5 sentiment score.
"""

import logging
import math
import time

import config.settings as settings
from src.agents.normalization import normalize, tokenize
from src.containers.ordered_collection import OrderedCollection
from src.errors import InvalidUserSelection
from src.models.review import Review
from src.models.sentiment import ReviewAnalysis, ReviewScore, Sentiment
from src.registry.lexicon import Lexicon

logger = logging.getLogger(__name__)


def score_review(text: str, lexicon: Lexicon) -> ReviewScore:
    """
    Count positive and negative words in a review.

    Tokens are fully normalized (lowercase, alphanumeric only) before
    lookup. Every occurrence is recorded, so a word seen three times
    appears three times in the result.
    """
    result = ReviewScore()

    for token in tokenize(text):
        word = normalize(token)
        if not word:
            continue

        polarity = lexicon.classify(word)
        if polarity is Sentiment.POSITIVE:
            result.positive_words.append(word)
            result.positive_count += 1
        elif polarity is Sentiment.NEGATIVE:
            result.negative_words.append(word)
            result.negative_count += 1

    return result


def sentiment_score(positive_count: int, negative_count: int) -> float:
    """
    Map the match balance to a score in [1, 5].

    The raw score (positive - negative) is normalized from [-N, N] to [0, 1]
    with N = positive + negative, then scaled to [1, 5]. No matches at all
    gives exactly 3.0.
    """
    total = positive_count + negative_count
    if total == 0:
        return settings.NEUTRAL_SCORE

    raw_score = positive_count - negative_count
    min_raw_score = -total
    max_raw_score = total
    normalized = (raw_score - min_raw_score) / (max_raw_score - min_raw_score)
    return 1 + 4 * normalized


def round_score(score: float) -> int:
    """
    Round half away from zero, clamped to 1..5.

    2.5 -> 3, 3.5 -> 4, 4.6 -> 5.
    """
    rounded = int(math.copysign(math.floor(abs(score) + 0.5), score))
    return max(settings.MIN_SCORE, min(settings.MAX_SCORE, rounded))


def classify_rating(rounded_score: int) -> Sentiment:
    if rounded_score >= settings.POSITIVE_RATING_THRESHOLD:
        return Sentiment.POSITIVE
    if rounded_score <= settings.NEGATIVE_RATING_THRESHOLD:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


class ScoringEngine:
    """
    Produces single-review sentiment reports.
    """

    def __init__(self, lexicon: Lexicon):
        """
        Args:
            lexicon: Built lexicon, read-only during scoring
        """
        self.lexicon = lexicon

    def score(self, text: str) -> ReviewScore:
        return score_review(text, self.lexicon)

    def analyze(self, review: Review) -> ReviewAnalysis:
        """
        Score one review and time the calculation.

        Args:
            review: Review to analyze

        Returns:
            ReviewAnalysis with counts, matched words, score and label
        """
        start = time.perf_counter()

        result = score_review(review.text, self.lexicon)
        score = sentiment_score(result.positive_count, result.negative_count)
        rounded = round_score(score)
        sentiment = classify_rating(rounded)

        elapsed_us = int((time.perf_counter() - start) * 1_000_000)

        logger.debug(
            f"Review #{review.ordinal}: +{result.positive_count} "
            f"-{result.negative_count} score={score:.2f} ({sentiment.label})"
        )

        return ReviewAnalysis(
            ordinal=review.ordinal,
            text=review.text,
            positive_count=result.positive_count,
            positive_words=result.positive_words,
            negative_count=result.negative_count,
            negative_words=result.negative_words,
            score=score,
            rounded_score=rounded,
            sentiment=sentiment,
            user_rating=review.rating,
            elapsed_microseconds=elapsed_us
        )

    def analyze_review(self, reviews: OrderedCollection, review_number: int) -> ReviewAnalysis:
        """
        Analyze the review at a 1-based position.

        Raises:
            InvalidUserSelection: If review_number is outside 1..reviews.size()
        """
        if review_number <= 0 or review_number > reviews.size():
            raise InvalidUserSelection(
                f"Invalid review number. Please enter a number between 1 and {reviews.size()}."
            )
        return self.analyze(reviews.get(review_number - 1))
