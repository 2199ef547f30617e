"""
Error taxonomy for the sentiment analyzer.

Structural errors (missing sources, allocation failure, index contract
violations) propagate to the CLI. Per-record and per-input errors are
recovered locally by the loader and the menu.
"""


class SentimentAnalyzerError(Exception):
    """Base class for all analyzer errors."""


class AllocationFailure(SentimentAnalyzerError, MemoryError):
    """Container storage could not grow. Fatal."""


class IndexOutOfRange(SentimentAnalyzerError, IndexError):
    """Container index outside [0, size). Caller contract violation."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Index {index} out of range for collection of size {size}")
        self.index = index
        self.size = size


class SourceUnavailable(SentimentAnalyzerError):
    """A word list or review source could not be opened."""

    def __init__(self, path: str, reason: str = ""):
        message = f"Failed to open file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path


class MalformedRecord(SentimentAnalyzerError, ValueError):
    """A single review row could not be parsed."""

    def __init__(self, line_number: int, reason: str):
        super().__init__(f"Malformed record on line {line_number}: {reason}")
        self.line_number = line_number
        self.reason = reason


class InvalidUserSelection(SentimentAnalyzerError, ValueError):
    """Menu choice or review number the user typed is not usable."""
