# hilite/highlighter/__init__.py
"""
Regex highlighting of single lines.

This package provides:
- compile_patterns: Build palette-colored matchers from raw patterns
- colorize: Render one line's matches to a ColorSink
- LineHighlighter: Pattern set plus options, applied line by line
"""

from .output import LineHighlighter, Match, colorize, find_matches
from .rules import CompiledPattern, compile_pattern, compile_patterns

__all__ = [
    "CompiledPattern",
    "LineHighlighter",
    "Match",
    "colorize",
    "compile_pattern",
    "compile_patterns",
    "find_matches",
]
