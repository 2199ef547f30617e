"""
Lexicon Sentiment Analyzer

CLI entry point: loads the word lists and reviews, runs the batch pass
and opens the interactive menu.
"""

import argparse
import logging
import sys

import config.settings as settings
from src.errors import InvalidUserSelection, SourceUnavailable
from src.menu import InteractiveMenu, ask_batch_gate
from src.orchestrator import SentimentOrchestrator
from src.utils.output import ConsoleSink


def setup_logging(log_level: str = "WARNING"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lexicon-based review sentiment analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive session with the default data files
  python main.py

  # Skip the yes/no prompt and export reports
  python main.py --batch --export-dir output

  # Analyze a single review and exit
  python main.py --review 42
        """
    )

    parser.add_argument(
        "--positive-words",
        default=str(settings.POSITIVE_WORDS_PATH),
        help=f"Positive word list (default: {settings.POSITIVE_WORDS_PATH})"
    )

    parser.add_argument(
        "--negative-words",
        default=str(settings.NEGATIVE_WORDS_PATH),
        help=f"Negative word list (default: {settings.NEGATIVE_WORDS_PATH})"
    )

    parser.add_argument(
        "--reviews",
        default=str(settings.REVIEWS_PATH),
        help=f"Review CSV with review,rating rows (default: {settings.REVIEWS_PATH})"
    )

    parser.add_argument(
        "--batch",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Run (or skip) the batch pass without prompting; no interactive menu"
    )

    parser.add_argument(
        "--review",
        type=int,
        help="Analyze this review number and exit"
    )

    parser.add_argument(
        "--export-dir",
        help="Write frequency tables and review scores as CSV to this directory"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def export_reports(orchestrator: SentimentOrchestrator, export_dir: str) -> None:
    for path in orchestrator.export(export_dir):
        print(f"Exported: {path}")


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    sink = ConsoleSink()
    orchestrator = SentimentOrchestrator(
        sink=sink,
        positive_words_path=args.positive_words,
        negative_words_path=args.negative_words,
        reviews_path=args.reviews
    )

    try:
        orchestrator.load()

        if args.review is not None:
            orchestrator.analyze_review(args.review)
            return 0

        run_batch = args.batch if args.batch is not None else ask_batch_gate()
        if not run_batch:
            print("Exiting without performing binary search.")
            if args.export_dir:
                export_reports(orchestrator, args.export_dir)
            return 0

        orchestrator.run_batch()

        if args.export_dir:
            export_reports(orchestrator, args.export_dir)

        if args.batch is None:
            InteractiveMenu(orchestrator, sink).run()

        logger.info("Sentiment analysis completed")
        return 0

    except SourceUnavailable as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except InvalidUserSelection as e:
        print(str(e), file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        print("\nInterrupted")
        return 1

    except Exception as e:
        logger.error(f"Sentiment analysis failed: {e}", exc_info=True)
        print(f"\nSentiment analysis failed: {e}", file=sys.stderr)
        print(f"Check {settings.LOG_FILE} for details", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
