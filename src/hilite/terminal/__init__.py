# hilite/terminal/__init__.py
"""Terminal output sinks and input stream processing."""

from .sink import AnsiColorSink, ColorSink
from .stream import ProcessStats, process_input

__all__ = ["AnsiColorSink", "ColorSink", "ProcessStats", "process_input"]
