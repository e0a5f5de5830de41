# hilite/highlighter/rules.py
"""
Pattern compilation for line highlighting.

This module contains:
- CompiledPattern: a compiled regex paired with its palette color
- compile_pattern / compile_patterns: build the ordered pattern set
"""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Tuple

import regex as re_engine

from ..colors import Color, color_for_index
from ..utils.exceptions import PatternCompileError
from ..utils.logger import get_logger

logger = get_logger("hilite.highlighter.rules")


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """
    A user pattern ready for matching.

    Attributes:
        source: The raw pattern string as given on the command line.
        pattern: Compiled regex pattern.
        color: Palette color assigned from the pattern's position.
        index: 0-based position in the input list; breaks ties when two
            matches start at the same offset.
    """

    source: str
    pattern: Any  # Compiled regex pattern
    color: Color
    index: int

    def finditer(self, line: str) -> Iterator[Tuple[int, int]]:
        """Yield (start, end) of every non-overlapping match in ``line``."""
        for match in self.pattern.finditer(line):
            yield match.start(), match.end()


def compile_pattern(source: str, index: int, case_sensitive: bool = False) -> CompiledPattern:
    """
    Compile one pattern and give it the palette color for ``index``.

    Raises:
        PatternCompileError: If ``source`` is not a valid regular expression.
    """
    flags = re_engine.VERSION0
    if not case_sensitive:
        flags |= re_engine.IGNORECASE

    try:
        pattern = re_engine.compile(source, flags)
    except re_engine.error as e:
        raise PatternCompileError(source, str(e)) from e

    return CompiledPattern(
        source=source,
        pattern=pattern,
        color=color_for_index(index),
        index=index,
    )


def compile_patterns(
    sources: Iterable[str], case_sensitive: bool = False
) -> Tuple[CompiledPattern, ...]:
    """
    Compile every pattern in order.

    All-or-nothing: the first invalid pattern aborts the whole set, so no
    caller can end up highlighting with a partial list.

    Raises:
        PatternCompileError: Naming the first pattern that failed.
    """
    compiled = []
    for index, source in enumerate(sources):
        try:
            compiled.append(compile_pattern(source, index, case_sensitive))
        except PatternCompileError as e:
            logger.error(e.message)
            raise

    logger.debug(
        f"Compiled {len(compiled)} patterns "
        f"({'case-sensitive' if case_sensitive else 'case-insensitive'})"
    )
    return tuple(compiled)
