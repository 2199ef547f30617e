"""
Report formatting.

Renders single-review analyses, the corpus summary and frequency listings
to an output sink.
"""

from typing import Iterable, Tuple

from src.models.sentiment import CorpusSummary, ReviewAnalysis
from src.utils.output import OutputSink


def format_frequencies(frequencies: Iterable[Tuple[str, int]]) -> str:
    """'word(count) | word(count) | NULL'"""
    parts = [f"{word}({count})" for word, count in frequencies]
    parts.append("NULL")
    return " | ".join(parts)


class ReportWriter:
    """
    Writes reports to a sink.
    """

    def __init__(self, sink: OutputSink):
        self.sink = sink

    def review(self, analysis: ReviewAnalysis) -> None:
        self.sink.clear()
        self.sink.write(f"Review #{analysis.ordinal}")
        self.sink.write(f"Comment: {analysis.text}")

        self.sink.write()
        self.sink.write(f"Positive Words = {analysis.positive_count}")
        for word in analysis.positive_words:
            self.sink.write(f"~ {word}")

        self.sink.write()
        self.sink.write(f"Negative Words = {analysis.negative_count}")
        for word in analysis.negative_words:
            self.sink.write(f"~ {word}")

        self.sink.write()
        self.sink.write(
            f"Sentiment Score Rating: {analysis.rounded_score} ({analysis.sentiment.label})"
        )
        self.sink.write(f"Rating given by user: {analysis.user_rating}")
        self.sink.write(f"Time Taken to Calculate: {analysis.elapsed_microseconds}us")

    def summary(self, summary: CorpusSummary) -> None:
        self.sink.clear()
        self.sink.write("==== Summary ====")
        self.sink.write(f"Number of Reviews: {summary.total_reviews}")
        self.sink.write(f"Total Words: {summary.total_words}")
        self.sink.write(f"Positive Words: {summary.positive_match_count}")
        self.sink.write(f"Negative Words: {summary.negative_match_count}")
        self.sink.write(f"Time Elapsed: {summary.elapsed_milliseconds} ms")

    def frequencies(self, frequencies: Iterable[Tuple[str, int]]) -> None:
        self.sink.clear()
        self.sink.write(format_frequencies(frequencies))
        self.sink.write()

    def progress(self, ordinal: int, total: int) -> None:
        self.sink.write_inline(f"Review #{ordinal}")
