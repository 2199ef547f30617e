"""
Output sinks.

Everything user-facing is written through a sink so that reports and the
menu can run headless.
"""

import sys
from abc import ABC, abstractmethod
from typing import List, TextIO

_ANSI_CLEAR = "\033[2J\033[H"


class OutputSink(ABC):
    """Destination for report text."""

    @abstractmethod
    def write(self, text: str = "") -> None:
        """Write one line."""

    @abstractmethod
    def write_inline(self, text: str) -> None:
        """Overwrite the current line (progress display)."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the screen, if the sink has one."""


class ConsoleSink(OutputSink):
    """Writes to a terminal stream (stdout by default)."""

    def __init__(self, stream: TextIO = None, clear_screen: bool = True):
        self.stream = stream or sys.stdout
        self.clear_screen = clear_screen

    def write(self, text: str = "") -> None:
        print(text, file=self.stream)

    def write_inline(self, text: str) -> None:
        print(f"\r{text}", end="", file=self.stream, flush=True)

    def clear(self) -> None:
        if self.clear_screen and self.stream.isatty():
            print(_ANSI_CLEAR, end="", file=self.stream, flush=True)


class BufferSink(OutputSink):
    """Collects output in memory."""

    def __init__(self):
        self.lines: List[str] = []
        self.clear_count = 0

    def write(self, text: str = "") -> None:
        self.lines.extend(text.split("\n"))

    def write_inline(self, text: str) -> None:
        self.lines.append(text)

    def clear(self) -> None:
        self.clear_count += 1

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
