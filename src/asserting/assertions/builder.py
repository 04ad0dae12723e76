"""Fluent builder that collects a check's context before its outcome is known."""

from __future__ import annotations

from typing import Any

from asserting.assertions.base import FAILED, PASSED, Assertion, Location, format_clue


class BuilderConsumedError(RuntimeError):
    """Raised when an :class:`Asserting` builder is used after ``is_true``."""


class Asserting:
    """Single-use accumulator for name, location and clues.

    Typical use mirrors the order in which information shows up at a call
    site::

        Asserting.that("x > 1").at("test_x.py", 12).with_clue(x, "x").is_true(x > 1)

    ``is_true`` hands the collected state to a new :class:`Assertion` and
    retires the builder; every later call raises :class:`BuilderConsumedError`.
    """

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("assertion name must not be empty")
        self._name = name
        self._at: Location | None = None
        self._clues: list[str] = []
        self._consumed = False

    @classmethod
    def that(cls, name: str) -> Asserting:
        return cls(name)

    def at(self, file: str, line: int) -> Asserting:
        self._check_usable()
        self._at = Location(file, line)
        return self

    def with_clue(self, value: Any, label: str) -> Asserting:
        self._check_usable()
        self._clues.append(format_clue(value, label))
        return self

    def is_true(self, truth: Any) -> Assertion:
        self._check_usable()
        self._consumed = True
        clues, self._clues = self._clues, []
        return Assertion(
            name=self._name,
            at=self._at,
            value=PASSED if truth else FAILED,
            clues=clues,
        )

    def _check_usable(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(
                f"builder for '{self._name}' was already finalized"
            )

    def __repr__(self) -> str:
        return (
            f"Asserting(name={self._name!r}, at={self._at!r}, "
            f"clues={self._clues!r}, consumed={self._consumed})"
        )
