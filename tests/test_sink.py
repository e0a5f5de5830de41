from __future__ import annotations

import io

import pytest

from hilite.colors import PALETTE, Color, ColorSpec, color_for_index
from hilite.highlighter.output import colorize
from hilite.highlighter.rules import compile_patterns
from hilite.terminal.sink import AnsiColorSink
from hilite.utils.exceptions import OutputWriteError


class BrokenStream(io.RawIOBase):
    def writable(self):
        return True

    def write(self, data):
        raise BrokenPipeError(32, "Broken pipe")


def test_color_spec_encoding():
    red, yellow = PALETTE[0], PALETTE[1]
    assert ColorSpec(fg=red).to_ansi() == "\033[31m"
    assert ColorSpec(bg=yellow).to_ansi() == "\033[43m"
    assert ColorSpec(fg=Color("light_yellow", 220)).to_ansi() == "\033[38;5;220m"
    assert ColorSpec(bg=Color("pink", 207)).to_ansi() == "\033[48;5;207m"
    assert ColorSpec(fg=Color("bright_red", 9), bg=red).to_ansi() == "\033[91;41m"
    assert ColorSpec().to_ansi() == ""


def test_color_index_bounds():
    with pytest.raises(ValueError):
        Color("bogus", 256)


def test_color_for_index_wraps():
    assert color_for_index(0) is PALETTE[0]
    assert color_for_index(len(PALETTE) + 2) is PALETTE[2]


def test_span_bytes():
    stream = io.BytesIO()
    sink = AnsiColorSink(stream)
    colorize("FOO bar", compile_patterns(["foo"]), False, False, sink)
    assert stream.getvalue() == b"\x1b[31mFOO\x1b[0m bar\n"


def test_whole_line_background_bytes():
    stream = io.BytesIO()
    sink = AnsiColorSink(stream)
    colorize("foo bar", compile_patterns(["foo"]), True, True, sink)
    assert stream.getvalue() == b"\x1b[41mfoo bar\x1b[0m\n"


def test_extended_palette_color_bytes():
    stream = io.BytesIO()
    sink = AnsiColorSink(stream)
    sources = [f"p{i}" for i in range(8)]
    colorize("p7", compile_patterns(sources), False, False, sink)
    assert stream.getvalue() == b"\x1b[38;5;220mp7\x1b[0m\n"


def test_color_disabled_writes_plain_text():
    stream = io.BytesIO()
    sink = AnsiColorSink(stream, use_color=False)
    colorize("hey foo hoy bar", compile_patterns(["foo", "bar"]), False, False, sink)
    assert stream.getvalue() == b"hey foo hoy bar\n"


def test_text_is_utf8_encoded():
    stream = io.BytesIO()
    AnsiColorSink(stream, use_color=False).write_line("résumé")
    assert stream.getvalue() == "résumé\n".encode("utf-8")


def test_write_failure_raises_output_write_error():
    sink = AnsiColorSink(BrokenStream())
    with pytest.raises(OutputWriteError) as excinfo:
        sink.write_line("x")
    assert excinfo.value.operation == "writing line"
    assert "Broken pipe" in str(excinfo.value)


def test_color_failure_names_operation():
    sink = AnsiColorSink(BrokenStream())
    with pytest.raises(OutputWriteError) as excinfo:
        sink.set_color(ColorSpec(fg=PALETTE[0]))
    assert excinfo.value.operation == "setting color"


def test_colorize_abandons_line_on_failure():
    sink = AnsiColorSink(BrokenStream())
    with pytest.raises(OutputWriteError):
        colorize("a foo", compile_patterns(["foo"]), False, False, sink)
