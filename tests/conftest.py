from __future__ import annotations

import pytest

from hilite.colors import ColorSpec
from hilite.terminal.sink import ColorSink


class RecordingSink(ColorSink):
    """
    Renders sink calls as readable markup: ``<fg:red>`` for set_color,
    ``</>`` for reset and a literal newline for each line terminator.
    """

    def __init__(self):
        self.calls = []

    def set_color(self, spec: ColorSpec) -> None:
        self.calls.append(("set_color", spec))

    def reset(self) -> None:
        self.calls.append(("reset", None))

    def write(self, text: str) -> None:
        self.calls.append(("write", text))

    def write_line(self, text: str) -> None:
        self.calls.append(("write_line", text))

    @property
    def markup(self) -> str:
        parts = []
        for kind, value in self.calls:
            if kind == "set_color":
                if value.bg is not None:
                    parts.append(f"<bg:{value.bg.name}>")
                else:
                    parts.append(f"<fg:{value.fg.name}>")
            elif kind == "reset":
                parts.append("</>")
            elif kind == "write":
                parts.append(value)
            else:
                parts.append(value + "\n")
        return "".join(parts)

    @property
    def plain_text(self) -> str:
        return "".join(
            value + ("\n" if kind == "write_line" else "")
            for kind, value in self.calls
            if kind in ("write", "write_line")
        )

    @property
    def style_calls(self) -> int:
        return sum(1 for kind, _ in self.calls if kind in ("set_color", "reset"))


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def diagnostics(capsys):
    """Captured stderr, where hilite writes one line per diagnostic."""
    return capsys
