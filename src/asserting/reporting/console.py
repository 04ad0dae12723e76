"""Terminal rendering of assertions and suites."""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Protocol, TextIO

import typer

if TYPE_CHECKING:
    from asserting.assertions.base import Assertion
    from asserting.suite import Suite


class StyleMode(str, Enum):
    AUTO = "auto"
    COLORED = "colored"
    PLAIN = "plain"


class Styler(Protocol):
    def check(self, passed: bool) -> str: ...

    def style(self, text: str, passed: bool) -> str: ...


class PlainStyler:
    """ASCII glyphs, no escape codes."""

    def check(self, passed: bool) -> str:
        return "+" if passed else "x"

    def style(self, text: str, passed: bool) -> str:
        return text


class ColoredStyler:
    """Green check for passes, red cross for everything else."""

    def _color(self, passed: bool) -> str:
        return typer.colors.GREEN if passed else typer.colors.RED

    def check(self, passed: bool) -> str:
        return typer.style("✔" if passed else "✖", fg=self._color(passed))

    def style(self, text: str, passed: bool) -> str:
        return typer.style(text, fg=self._color(passed))


def get_styler(mode: StyleMode | str = StyleMode.AUTO, stream: TextIO | None = None) -> Styler:
    """Pick a styler for *mode*.

    ``auto`` colors only when *stream* (stdout by default) is a terminal and
    ``NO_COLOR`` is not set.
    """
    mode = StyleMode(mode)
    if mode is StyleMode.AUTO:
        stream = stream if stream is not None else sys.stdout
        isatty = getattr(stream, "isatty", None)
        colored = bool(isatty and isatty()) and "NO_COLOR" not in os.environ
        mode = StyleMode.COLORED if colored else StyleMode.PLAIN
    if mode is StyleMode.COLORED:
        return ColoredStyler()
    return PlainStyler()


def render_assertion(assertion: Assertion, styler: Styler | None = None) -> str:
    """Render one assertion.

    A passing assertion is a single line. Anything else also lists the
    location, the clues and, for errored checks, the error description.
    """
    styler = styler or PlainStyler()
    passed = assertion.passed
    lines = [f"{styler.check(passed)} {styler.style(assertion.name, passed)}"]
    if not passed:
        details: list[str] = []
        if assertion.at is not None:
            details.append(str(assertion.at))
        details.extend(assertion.clues)
        if assertion.errored:
            details.append(f"error = {assertion.value.describe()}")
        lines.extend(f"  {styler.style(detail, passed)}" for detail in details)
    return "".join(f"{line}\n" for line in lines)


def render_suite(suite: Suite, styler: Styler | None = None) -> str:
    styler = styler or PlainStyler()
    parts = [f"{suite.name}\n"]
    parts.extend(render_assertion(a, styler) for a in suite.assertions)
    counts = suite.counts()
    parts.append(
        f"{counts['passed']} passed, {counts['failed']} failed, "
        f"{counts['errored']} errored\n"
    )
    return "".join(parts)
