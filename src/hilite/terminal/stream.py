# hilite/terminal/stream.py
"""
Line-at-a-time processing of an input stream.

A line that cannot be decoded is skipped; a line whose output cannot be
written is abandoned. Either way exactly one diagnostic is logged and the
next line is processed.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple, Union

from ..highlighter.output import LineHighlighter
from ..highlighter.rules import CompiledPattern
from ..settings.config import ColorizeOptions
from ..utils.exceptions import InputReadError, OutputWriteError
from ..utils.logger import get_logger
from .sink import ColorSink

logger = get_logger("hilite.terminal.stream")


@dataclass(slots=True)
class ProcessStats:
    """Counters for one run over an input stream."""

    lines_read: int = 0
    lines_matched: int = 0
    read_errors: int = 0
    write_errors: int = 0


def decode_line(raw: bytes, line_number: int) -> str:
    """
    Strip the line terminator (``\\n`` or ``\\r\\n``) and decode as UTF-8.

    Raises:
        InputReadError: If the bytes are not valid UTF-8.
    """
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputReadError(line_number, str(e)) from e


def iter_lines(
    reader: Iterable[bytes],
) -> Iterator[Tuple[int, Union[str, InputReadError]]]:
    """
    Yield ``(line_number, text)`` for each input line, or
    ``(line_number, InputReadError)`` for a line that failed to decode.

    An OSError from the reader itself ends iteration after being reported
    as an InputReadError, since the stream cannot produce further lines.
    """
    line_number = 0
    iterator = iter(reader)
    while True:
        line_number += 1
        try:
            raw = next(iterator)
        except StopIteration:
            return
        except OSError as e:
            yield line_number, InputReadError(line_number, str(e))
            return

        try:
            yield line_number, decode_line(raw, line_number)
        except InputReadError as e:
            yield line_number, e


def process_input(
    reader: Iterable[bytes],
    patterns: Sequence[CompiledPattern],
    options: ColorizeOptions,
    out: ColorSink,
) -> ProcessStats:
    """
    Highlight every line from ``reader`` into ``out``.

    Args:
        reader: Binary line iterable, normally ``sys.stdin.buffer``.
        patterns: Compiled patterns from compile_patterns().
        options: Rendering options shared by all lines.
        out: Sink receiving the highlighted output.

    Returns:
        ProcessStats with line, match and error counts.
    """
    highlighter = LineHighlighter(patterns, options)
    stats = ProcessStats()

    for line_number, item in iter_lines(reader):
        if isinstance(item, InputReadError):
            stats.read_errors += 1
            logger.error(item.message)
            continue

        stats.lines_read += 1
        try:
            if highlighter.highlight_line(item, out):
                stats.lines_matched += 1
        except OutputWriteError as e:
            stats.write_errors += 1
            logger.error(f"{e.message} (line {line_number})")

    try:
        out.flush()
    except OutputWriteError as e:
        stats.write_errors += 1
        logger.error(e.message)

    logger.debug(
        f"Processed {stats.lines_read} lines, {stats.lines_matched} matched, "
        f"{stats.read_errors} read errors, {stats.write_errors} write errors"
    )
    return stats
