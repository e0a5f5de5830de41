from __future__ import annotations

import pytest

from hilite.colors import PALETTE
from hilite.highlighter.rules import compile_pattern, compile_patterns
from hilite.utils.exceptions import PatternCompileError


def test_colors_follow_pattern_position():
    sources = [f"p{i}" for i in range(len(PALETTE) * 2 + 3)]
    compiled = compile_patterns(sources)
    assert [c.color for c in compiled] == [
        PALETTE[i % len(PALETTE)] for i in range(len(sources))
    ]
    assert [c.index for c in compiled] == list(range(len(sources)))


def test_color_ignores_pattern_content():
    first = compile_patterns(["foo", "bar"], case_sensitive=True)
    second = compile_patterns(["[0-9]+", "x"], case_sensitive=False)
    assert [c.color for c in first] == [c.color for c in second]


def test_palette_starts_with_basic_colors():
    assert [c.name for c in PALETTE[:6]] == [
        "red",
        "yellow",
        "blue",
        "green",
        "magenta",
        "cyan",
    ]
    assert len(PALETTE) == 12


def test_case_insensitive_by_default():
    compiled = compile_pattern("foo", 0)
    assert list(compiled.finditer("FOO bar")) == [(0, 3)]


def test_case_sensitive_flag():
    compiled = compile_pattern("foo", 0, case_sensitive=True)
    assert list(compiled.finditer("FOO bar")) == []
    assert list(compiled.finditer("a foo")) == [(2, 5)]


def test_empty_pattern_list():
    assert compile_patterns([]) == ()


def test_invalid_pattern_names_offender():
    with pytest.raises(PatternCompileError) as excinfo:
        compile_patterns(["ok", "foo(", "bar"])
    assert excinfo.value.pattern == "foo("
    assert excinfo.value.reason
    assert "foo(" in str(excinfo.value)


def test_invalid_pattern_is_logged_once(diagnostics):
    with pytest.raises(PatternCompileError):
        compile_patterns(["[unclosed"])
    err = diagnostics.readouterr().err
    assert err.count("Error compiling pattern '[unclosed'") == 1
