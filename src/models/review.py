"""
Review data model.

Represents one row of the review source.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Review:
    """
    A review loaded from the CSV source.
    Immutable after load.
    """
    ordinal: int  # 1-based position among successfully parsed rows
    text: str  # Raw review text
    rating: int  # Rating given by the user
    word_count: int = 0  # Whitespace-separated tokens in text

    def __post_init__(self):
        if self.ordinal < 1:
            raise ValueError(f"Invalid ordinal: {self.ordinal}. Must be >= 1")
