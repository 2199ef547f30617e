"""
Configuration settings for the sentiment analyzer.

Centralized configuration for sources, containers and logging.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = PROJECT_ROOT / "data"
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Sources (override with environment variables)
POSITIVE_WORDS_PATH = Path(
    os.getenv("SENTIMENT_POSITIVE_WORDS", str(DATA_ROOT / "positive-words.txt"))
)
NEGATIVE_WORDS_PATH = Path(
    os.getenv("SENTIMENT_NEGATIVE_WORDS", str(DATA_ROOT / "negative-words.txt"))
)
REVIEWS_PATH = Path(
    os.getenv("SENTIMENT_REVIEWS", str(DATA_ROOT / "tripadvisor_hotel_reviews.csv"))
)
SOURCE_ENCODING = os.getenv("SENTIMENT_SOURCE_ENCODING", "utf-8")

# Word lists
LEXICON_COMMENT_PREFIX = ";"  # Hu & Liu opinion lexicon header lines

# Containers
INITIAL_CAPACITY = 10

# Scoring
MIN_SCORE = 1
MAX_SCORE = 5
NEUTRAL_SCORE = 3.0
POSITIVE_RATING_THRESHOLD = 4  # rounded score >= this is Positive
NEGATIVE_RATING_THRESHOLD = 2  # rounded score <= this is Negative

# Report export file names
POSITIVE_FREQUENCIES_FILE = "positive_frequencies.csv"
NEGATIVE_FREQUENCIES_FILE = "negative_frequencies.csv"
REVIEW_SCORES_FILE = "review_scores.csv"

# Logging
LOG_LEVEL = "WARNING"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = os.getenv("SENTIMENT_LOG_FILE", "sentiment.log")
