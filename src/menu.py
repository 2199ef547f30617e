"""
Interactive menu.

Text menu over a loaded orchestrator. Bad input re-prompts; end of input
leaves the menu.
"""

import logging
from enum import IntEnum
from typing import Callable, Optional

from src.errors import InvalidUserSelection
from src.models.sentiment import Sentiment
from src.orchestrator import SentimentOrchestrator
from src.utils.output import OutputSink

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]

MENU_TEXT = """Main Menu:
1 - Display Positive Words
2 - Display Negative Words
3 - Generate Sentiment Analysis
4 - Print Summary
0 - Exit"""

BATCH_PROMPT = "Do you want to perform Binary Search? Yes - 1, No - 0\n>> "
REVIEW_PROMPT = "Enter review number to analyze (Q to exit): "


class MenuChoice(IntEnum):
    EXIT = 0
    POSITIVE_WORDS = 1
    NEGATIVE_WORDS = 2
    ANALYZE_REVIEW = 3
    SUMMARY = 4


def parse_menu_choice(raw: str) -> MenuChoice:
    """
    Raises:
        InvalidUserSelection: If raw is not a number or not a menu entry
    """
    try:
        value = int(raw.strip())
    except ValueError:
        raise InvalidUserSelection("Invalid input. Please enter a valid number.") from None

    try:
        return MenuChoice(value)
    except ValueError:
        raise InvalidUserSelection("Invalid choice. Try again.") from None


def parse_review_number(raw: str, review_count: int) -> int:
    """
    Raises:
        InvalidUserSelection: If raw is not a number in 1..review_count
    """
    try:
        number = int(raw.strip())
    except ValueError:
        raise InvalidUserSelection("Invalid input. Please enter a valid number or Q to exit.") from None

    if number <= 0 or number > review_count:
        raise InvalidUserSelection(
            f"Invalid review number. Please enter a number between 1 and {review_count}."
        )
    return number


def ask_batch_gate(input_func: Optional[InputFunc] = None) -> bool:
    """Yes/no gate for the batch pass. Only "1" means yes."""
    input_func = input_func or input
    try:
        answer = input_func(BATCH_PROMPT)
    except EOFError:
        return False
    return answer.strip() == "1"


class InteractiveMenu:
    """
    Main menu loop.
    """

    def __init__(
        self,
        orchestrator: SentimentOrchestrator,
        sink: OutputSink,
        input_func: Optional[InputFunc] = None
    ):
        """
        Args:
            orchestrator: Loaded orchestrator with a completed batch pass
            sink: Destination for menu text
            input_func: Prompt reader, input() by default
        """
        self.orchestrator = orchestrator
        self.sink = sink
        self.input_func = input_func or input

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        while True:
            self.sink.write(MENU_TEXT)
            try:
                raw = self.input_func(">> ")
            except EOFError:
                logger.debug("Input closed, leaving menu")
                return

            try:
                choice = parse_menu_choice(raw)
            except InvalidUserSelection as e:
                self.sink.write(str(e))
                continue

            if choice is MenuChoice.EXIT:
                return
            if not self.dispatch(choice):
                return

    def dispatch(self, choice: MenuChoice) -> bool:
        """
        Run one menu entry.

        Returns:
            False if input ended while handling the entry
        """
        if choice is MenuChoice.POSITIVE_WORDS:
            self.orchestrator.show_frequencies(Sentiment.POSITIVE)
            return self._wait_for_enter()
        if choice is MenuChoice.NEGATIVE_WORDS:
            self.orchestrator.show_frequencies(Sentiment.NEGATIVE)
            return self._wait_for_enter()
        if choice is MenuChoice.ANALYZE_REVIEW:
            self.sink.clear()
            return self.review_loop()
        if choice is MenuChoice.SUMMARY:
            self.orchestrator.show_summary()
        return True

    def review_loop(self) -> bool:
        """
        Prompt for review numbers until Q.

        Returns:
            False if input ended
        """
        while True:
            try:
                raw = self.input_func(REVIEW_PROMPT)
            except EOFError:
                return False

            if raw.strip() in ("Q", "q"):
                self.sink.clear()
                return True

            try:
                number = parse_review_number(raw, self.orchestrator.review_count)
            except InvalidUserSelection as e:
                self.sink.write(str(e))
                continue

            self.orchestrator.analyze_review(number)

    def _wait_for_enter(self) -> bool:
        try:
            self.input_func("Press Enter to Continue...")
        except EOFError:
            return False
        self.sink.clear()
        return True
