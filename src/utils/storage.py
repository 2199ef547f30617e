"""
Storage utility.

Exports frequency tables and per-review scores as CSV.
"""

import logging
import os
from typing import Iterable, List, Tuple

import pandas as pd

import config.settings as settings
from src.models.sentiment import ReviewAnalysis

logger = logging.getLogger(__name__)


class ReportStorage:
    """
    Writes report tables under one output directory.

    Handles:
    - Word frequencies (positive_frequencies.csv, negative_frequencies.csv)
    - Per-review scores (review_scores.csv)
    """

    def __init__(self, output_dir: str):
        """
        Initialize report storage.

        Args:
            output_dir: Directory for exported CSV files
        """
        self.output_dir = output_dir
        os.makedirs(self.output_dir, exist_ok=True)

        logger.info(f"Initialized ReportStorage with output_dir={output_dir}")

    def save_frequencies(self, frequencies: Iterable[Tuple[str, int]], filename: str) -> str:
        """
        Save (word, count) pairs, most frequent first.

        Args:
            frequencies: (word, count) pairs
            filename: CSV file name inside output_dir

        Returns:
            Path to the written CSV
        """
        df = pd.DataFrame(list(frequencies), columns=["word", "count"])
        if not df.empty:
            df = df.sort_values(["count", "word"], ascending=[False, True])

        filepath = os.path.join(self.output_dir, filename)
        df.to_csv(filepath, index=False)
        logger.info(f"Saved {len(df)} word frequencies to {filepath}")
        return filepath

    def save_positive_frequencies(self, frequencies: Iterable[Tuple[str, int]]) -> str:
        return self.save_frequencies(frequencies, settings.POSITIVE_FREQUENCIES_FILE)

    def save_negative_frequencies(self, frequencies: Iterable[Tuple[str, int]]) -> str:
        return self.save_frequencies(frequencies, settings.NEGATIVE_FREQUENCIES_FILE)

    def save_review_scores(self, analyses: List[ReviewAnalysis]) -> str:
        """
        Save one row per analyzed review.

        Returns:
            Path to the written CSV
        """
        columns = [
            "review", "positive_count", "negative_count", "score",
            "rounded_score", "sentiment", "user_rating"
        ]
        df = pd.DataFrame([a.to_dict() for a in analyses], columns=columns)

        filepath = os.path.join(self.output_dir, settings.REVIEW_SCORES_FILE)
        df.to_csv(filepath, index=False)
        logger.info(f"Saved {len(df)} review scores to {filepath}")
        return filepath
