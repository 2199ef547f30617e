"""
Pipeline Orchestrator.

Wires loading, lexicon build, the batch pass and single-review analysis.
"""

import logging
from typing import List, Optional, Tuple

import config.settings as settings
from src.agents.aggregation import BatchAnalyzer
from src.agents.ingestion import IngestionAgent
from src.agents.reporting import ReportWriter
from src.agents.scoring import ScoringEngine
from src.containers.ordered_collection import OrderedCollection
from src.models.sentiment import CorpusSummary, ReviewAnalysis, Sentiment
from src.registry.lexicon import Lexicon
from src.utils.output import OutputSink
from src.utils.storage import ReportStorage

logger = logging.getLogger(__name__)


class SentimentOrchestrator:
    """
    Coordinates the analyzer.

    1. Load word lists → 2. Build lexicon → 3. Load reviews
    → 4. Batch pass (optional) → 5. Reports on demand
    """

    def __init__(
        self,
        sink: OutputSink,
        positive_words_path: str = str(settings.POSITIVE_WORDS_PATH),
        negative_words_path: str = str(settings.NEGATIVE_WORDS_PATH),
        reviews_path: str = str(settings.REVIEWS_PATH)
    ):
        """
        Initialize orchestrator.

        Args:
            sink: Destination for all reports
            positive_words_path: Positive word list file
            negative_words_path: Negative word list file
            reviews_path: Review CSV file
        """
        self.positive_words_path = positive_words_path
        self.negative_words_path = negative_words_path
        self.reviews_path = reviews_path

        self.ingestion_agent = IngestionAgent()
        self.reports = ReportWriter(sink)

        self.lexicon: Optional[Lexicon] = None
        self.reviews: Optional[OrderedCollection] = None
        self.scoring_engine: Optional[ScoringEngine] = None
        self.batch_analyzer: Optional[BatchAnalyzer] = None
        self.batch_completed = False

    def load(self) -> None:
        """
        Load all sources and build the lexicon.

        Raises:
            SourceUnavailable: If any source cannot be opened
        """
        logger.info("Loading sources...")

        positive_words, negative_words = self.ingestion_agent.load_word_lists(
            self.positive_words_path,
            self.negative_words_path
        )
        self.lexicon = Lexicon.build(positive_words, negative_words)
        self.reviews = self.ingestion_agent.load_reviews(self.reviews_path)

        self.scoring_engine = ScoringEngine(self.lexicon)
        self.batch_analyzer = BatchAnalyzer(self.lexicon)
        self.batch_completed = False

        logger.info("Sources loaded")

    def _require_loaded(self) -> None:
        if self.lexicon is None:
            raise RuntimeError("Sources not loaded; call load() first")

    @property
    def review_count(self) -> int:
        self._require_loaded()
        return self.reviews.size()

    def run_batch(self, show_progress: bool = True) -> CorpusSummary:
        """
        Run the batch pass over all reviews and report the summary.
        """
        self._require_loaded()

        self.reports.sink.clear()
        if show_progress:
            self.reports.sink.write("Performing Binary Search.....")
        on_progress = self.reports.progress if show_progress else None

        self.batch_analyzer.analyze_all(self.reviews, on_progress=on_progress)
        self.batch_completed = True

        if show_progress:
            self.reports.sink.write()

        summary = self.summary()
        self.reports.summary(summary)
        self.reports.sink.write()
        return summary

    def summary(self) -> CorpusSummary:
        self._require_loaded()
        return self.batch_analyzer.summarize(self.reviews)

    def word_frequencies(self, polarity: Sentiment) -> List[Tuple[str, int]]:
        self._require_loaded()
        return self.batch_analyzer.word_frequencies(polarity)

    def show_frequencies(self, polarity: Sentiment) -> None:
        self.reports.frequencies(self.word_frequencies(polarity))

    def show_summary(self) -> None:
        self.reports.summary(self.summary())
        self.reports.sink.write()

    def analyze_review(self, review_number: int) -> ReviewAnalysis:
        """
        Analyze and report one review.

        Raises:
            InvalidUserSelection: If review_number is out of range
        """
        self._require_loaded()
        analysis = self.scoring_engine.analyze_review(self.reviews, review_number)
        self.reports.review(analysis)
        self.reports.sink.write()
        return analysis

    def score_all(self) -> List[ReviewAnalysis]:
        """Single-review analysis of every review, without reporting."""
        self._require_loaded()
        return [self.scoring_engine.analyze(review) for review in self.reviews]

    def export(self, output_dir: str) -> List[str]:
        """
        Write frequency tables (when a batch pass ran) and per-review scores.

        Returns:
            Paths of written files
        """
        self._require_loaded()
        storage = ReportStorage(output_dir)

        paths = []
        if self.batch_completed:
            paths.append(storage.save_positive_frequencies(
                self.word_frequencies(Sentiment.POSITIVE)
            ))
            paths.append(storage.save_negative_frequencies(
                self.word_frequencies(Sentiment.NEGATIVE)
            ))
        else:
            logger.warning("Batch pass not run, skipping frequency export")

        paths.append(storage.save_review_scores(self.score_all()))
        return paths
