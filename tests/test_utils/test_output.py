"""
Unit tests for output sinks.
"""

import io

import pytest

from src.utils.output import BufferSink, ConsoleSink, OutputSink


def test_incomplete_sink_cannot_be_created():
    """A sink missing one of the abstract methods fails at construction."""
    class LineOnlySink(OutputSink):
        def write(self, text=""):
            pass

    with pytest.raises(TypeError):
        LineOnlySink()


def test_buffer_sink_splits_lines():
    sink = BufferSink()
    sink.write("one\ntwo")
    sink.write_inline("Review #3")
    sink.clear()

    assert sink.lines == ["one", "two", "Review #3"]
    assert sink.clear_count == 1


def test_console_sink_skips_clear_when_not_a_terminal():
    stream = io.StringIO()
    sink = ConsoleSink(stream)

    sink.write("hello")
    sink.clear()

    assert stream.getvalue() == "hello\n"


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
