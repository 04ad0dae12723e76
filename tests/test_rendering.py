"""Tests for terminal rendering of assertions and suites."""

import io
import re

import pytest

from asserting.assertions import Asserting, Assertion, Errored, Location
from asserting.reporting.console import (
    ColoredStyler,
    PlainStyler,
    StyleMode,
    get_styler,
    render_assertion,
)
from asserting.suite import Suite

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _strip(text: str) -> str:
    return ANSI.sub("", text)


@pytest.fixture
def failed_x() -> Assertion:
    return Asserting.that("x").at("f.rs", 10).with_clue(5, "x").is_true(False)


# --- plain ---


def test_plain_failed_scenario(failed_x):
    assert render_assertion(failed_x, PlainStyler()) == "x x\n  at f.rs:10\n  x = 5\n"


def test_plain_is_default(failed_x):
    assert failed_x.render() == "x x\n  at f.rs:10\n  x = 5\n"
    assert str(failed_x) == failed_x.render()


def test_passed_hides_location_and_clues():
    result = (
        Asserting.that("one < two")
        .at("a.py", 3)
        .with_clue(1, "one")
        .with_clue(2, "two")
        .is_true(True)
    )
    assert result.render(PlainStyler()) == "+ one < two\n"
    assert _strip(result.render(ColoredStyler())) == "✔ one < two\n"


def test_failed_with_location_and_two_clues_has_three_indented_lines():
    result = (
        Asserting.that("a == b")
        .at("a.py", 7)
        .with_clue(1, "a")
        .with_clue(2, "b")
        .is_true(False)
    )
    lines = result.render().splitlines()
    assert lines[0] == "x a == b"
    assert lines[1:] == ["  at a.py:7", "  a = 1", "  b = 2"]


def test_failed_without_location_or_clues_is_one_line():
    assert Asserting.that("ready").is_true(False).render() == "x ready\n"


def test_failed_without_location_lists_clues_only():
    result = Asserting.that("ready").with_clue(None, "state").is_true(False)
    assert result.render() == "x ready\n  state = None\n"


def test_errored_lists_error_after_clues():
    result = Assertion(
        "divide(1, 0)",
        at=Location("calc.py", 4),
        value=Errored(ZeroDivisionError("division by zero")),
        clues=["d = 0"],
    )
    assert result.render() == (
        "x divide(1, 0)\n  at calc.py:4\n  d = 0\n  error = division by zero\n"
    )


# --- colored ---


def test_colored_failed_scenario(failed_x):
    text = render_assertion(failed_x, ColoredStyler())
    assert "\x1b[" in text
    assert _strip(text) == "✖ x\n  at f.rs:10\n  x = 5\n"


def test_colored_uses_red_for_failures_and_green_for_passes():
    failed = Asserting.that("a").is_true(False).render(ColoredStyler())
    passed = Asserting.that("a").is_true(True).render(ColoredStyler())
    assert "\x1b[31m" in failed
    assert "\x1b[32m" in passed


def test_plain_never_emits_escape_codes(failed_x):
    assert "\x1b[" not in failed_x.render(PlainStyler())


# --- get_styler ---


class _Tty(io.StringIO):
    def isatty(self):
        return True


def test_explicit_modes():
    assert isinstance(get_styler(StyleMode.PLAIN), PlainStyler)
    assert isinstance(get_styler("colored"), ColoredStyler)


def test_auto_is_plain_when_not_a_terminal():
    assert isinstance(get_styler(StyleMode.AUTO, io.StringIO()), PlainStyler)


def test_auto_is_colored_on_a_terminal(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert isinstance(get_styler(StyleMode.AUTO, _Tty()), ColoredStyler)


def test_auto_respects_no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert isinstance(get_styler(StyleMode.AUTO, _Tty()), PlainStyler)


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        get_styler("sparkly")


# --- suites ---


def test_render_suite_lists_assertions_and_summary():
    suite = Suite("arith")
    suite.add(Asserting.that("a").with_clue(1, "a").is_true(True))
    suite.add(Asserting.that("b").with_clue(1, "b").is_true(False))
    suite.add(Assertion("c", value=Errored("boom")))
    assert suite.render() == (
        "arith\n"
        "+ a\n"
        "x b\n"
        "  b = 1\n"
        "x c\n"
        "  error = boom\n"
        "1 passed, 1 failed, 1 errored\n"
    )
