# hilite/terminal/sink.py
"""
Output sinks for highlighted lines.

The highlighter only talks to the ColorSink interface; whether escape
sequences actually reach the terminal is decided when the sink is built.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from ..colors import ANSI_RESET, ColorSpec
from ..utils.exceptions import OutputWriteError

LINE_TERMINATOR = "\n"


class ColorSink(ABC):
    """Destination for styled text."""

    @abstractmethod
    def set_color(self, spec: ColorSpec) -> None:
        """Style everything written until the next reset()."""

    @abstractmethod
    def reset(self) -> None:
        """Return to unstyled output."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Write ``text`` with the current style."""

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write ``text`` followed by a line terminator."""

    def flush(self) -> None:
        """Push buffered output to its destination."""


class AnsiColorSink(ColorSink):
    """
    Writes UTF-8 text with ANSI SGR escapes to a binary stream.

    With ``use_color`` off, set_color() and reset() emit nothing and the
    output is plain text. With ``flush_lines`` on, every write_line()
    flushes, so a failing terminal is noticed on the line that caused it.

    Any OSError from the stream (a closed pipe, a full disk) is raised as
    OutputWriteError naming the operation that failed.
    """

    def __init__(self, stream: BinaryIO, use_color: bool = True, flush_lines: bool = False):
        self.stream = stream
        self.use_color = use_color
        self.flush_lines = flush_lines

    def _emit(self, text: str, operation: str) -> None:
        try:
            self.stream.write(text.encode("utf-8"))
        except OSError as e:
            raise OutputWriteError(operation, str(e)) from e

    def set_color(self, spec: ColorSpec) -> None:
        if self.use_color and not spec.is_none():
            self._emit(spec.to_ansi(), "setting color")

    def reset(self) -> None:
        if self.use_color:
            self._emit(ANSI_RESET, "resetting color")

    def write(self, text: str) -> None:
        if text:
            self._emit(text, "writing line")

    def write_line(self, text: str) -> None:
        self._emit(text + LINE_TERMINATOR, "writing line")
        if self.flush_lines:
            self.flush()

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as e:
            raise OutputWriteError("flushing output", str(e)) from e
