# hilite/utils/exceptions.py
"""
Exception hierarchy for hilite.

Each error carries a human readable message plus a ``details`` dict with
the structured fields that produced it, so callers can log either.
"""

from typing import Any, Dict, Optional


class HiliteError(Exception):
    """Base class for all hilite errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class PatternCompileError(HiliteError):
    """A user pattern could not be compiled. Fatal: no input is processed."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(
            f"Error compiling pattern '{pattern}': {reason}",
            {"pattern": pattern, "reason": reason},
        )


class InputReadError(HiliteError):
    """An input line could not be read or decoded. The line is skipped."""

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(
            f"Error reading line {line_number}: {reason}",
            {"line_number": line_number, "reason": reason},
        )


class OutputWriteError(HiliteError):
    """A write, color-set or reset on the output sink failed."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(
            f"Error {operation}: {reason}",
            {"operation": operation, "reason": reason},
        )
