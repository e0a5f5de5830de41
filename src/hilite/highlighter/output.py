# hilite/highlighter/output.py
"""
Line highlighter for pattern matches.

This module provides colorize(), which finds every pattern match on a
line, resolves overlaps left to right and renders the result to a
ColorSink, and LineHighlighter, which binds a pattern set and rendering
options for repeated use.
"""

from typing import TYPE_CHECKING, List, NamedTuple, Sequence

from ..colors import Color, ColorSpec
from ..settings.config import ColorizeOptions

if TYPE_CHECKING:
    from ..terminal.sink import ColorSink
    from .rules import CompiledPattern


class Match(NamedTuple):
    """A half-open [start, end) span found by one pattern."""

    start: int
    end: int
    color: Color
    pattern_index: int


def find_matches(line: str, patterns: Sequence["CompiledPattern"]) -> List[Match]:
    """
    Collect the matches of every pattern against the full line.

    Patterns never consume text from each other; each one scans the
    original line independently. The result is sorted by start offset,
    with the earlier pattern first when two matches start together.
    Match length plays no part in the ordering.
    """
    matches: List[Match] = []
    for compiled in patterns:
        for start, end in compiled.finditer(line):
            matches.append(Match(start, end, compiled.color, compiled.index))

    matches.sort(key=lambda m: (m.start, m.pattern_index))
    return matches


def colorize(
    line: str,
    patterns: Sequence["CompiledPattern"],
    whole_line: bool,
    background: bool,
    out: "ColorSink",
) -> bool:
    """
    Write ``line`` to ``out`` with its matches colored.

    In whole-line mode the entire line takes the color of the earliest
    match. Otherwise each match is colored on its own and any match that
    starts inside an already rendered one is dropped.

    Args:
        line: The line to highlight, without its terminator.
        patterns: Compiled patterns in their original order.
        whole_line: Color the entire line instead of the matched spans.
        background: Apply colors to the background instead of the text.
        out: Sink receiving text and style changes.

    Returns:
        True if at least one pattern matched.

    Raises:
        OutputWriteError: If the sink fails; the rest of the line is abandoned.
    """
    matches = find_matches(line, patterns)

    if not matches:
        out.write_line(line)
        return False

    if whole_line:
        out.set_color(ColorSpec.for_color(matches[0].color, background))
        out.write(line)
        out.reset()
        out.write_line("")
        return True

    last_end = 0
    for start, end, color, _index in matches:
        # Skip if it begins inside a span that was already rendered
        if start < last_end:
            continue

        out.write(line[last_end:start])
        out.set_color(ColorSpec.for_color(color, background))
        out.write(line[start:end])
        out.reset()
        last_end = end

    out.write_line(line[last_end:])
    return True


class LineHighlighter:
    """
    Applies a fixed pattern set to one line at a time.

    Holds no per-line state, so a single instance serves a whole stream.
    """

    def __init__(self, patterns: Sequence["CompiledPattern"], options: ColorizeOptions):
        self.patterns = tuple(patterns)
        self.options = options

    def highlight_line(self, line: str, out: "ColorSink") -> bool:
        """Render ``line`` to ``out``; returns True if anything matched."""
        return colorize(
            line,
            self.patterns,
            self.options.whole_line,
            self.options.background,
            out,
        )


__all__ = ["LineHighlighter", "Match", "colorize", "find_matches"]
