"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from asserting.reporting.console import Styler
    from asserting.results import AssertionRecord


def format_clue(value: Any, label: str) -> str:
    """Render a clue as ``"<label> = <repr(value)>"``."""
    return f"{label} = {value!r}"


@dataclass(frozen=True)
class Location:
    """Source position of a checked expression."""

    file: str
    line: int

    def __post_init__(self) -> None:
        if self.line < 0:
            raise ValueError(f"line must be non-negative, got {self.line}")

    def __str__(self) -> str:
        return f"at {self.file}:{self.line}"


class Outcome(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"


@dataclass(frozen=True)
class AssertionValue:
    """Outcome of a single check.

    Attributes:
        outcome: Which of the three states is active.
        error: The error carried by an errored check. Any object with a
            meaningful ``str()`` will do; exceptions are the usual case.
            Must be set for ``ERRORED`` and must be ``None`` otherwise.
    """

    outcome: Outcome
    error: Any = None

    def __post_init__(self) -> None:
        if self.outcome is Outcome.ERRORED and self.error is None:
            raise ValueError("errored outcome requires an error")
        if self.outcome is not Outcome.ERRORED and self.error is not None:
            raise ValueError(f"{self.outcome.value} outcome cannot carry an error")

    def describe(self) -> str | None:
        if self.error is None:
            return None
        text = str(self.error)
        if not text and isinstance(self.error, BaseException):
            return type(self.error).__name__
        return text


PASSED = AssertionValue(Outcome.PASSED)
FAILED = AssertionValue(Outcome.FAILED)


def Errored(error: Any) -> AssertionValue:
    return AssertionValue(Outcome.ERRORED, error)


@dataclass(frozen=True)
class Assertion:
    """Finalized record of one checked expectation.

    ``name``, ``at`` and ``value`` are fixed once the record exists. The
    ``clues`` list keeps growing through :meth:`with_clue` so that context
    can still be attached after the outcome is known.

    Attributes:
        name: Source text of the checked expression (e.g. ``"one == two"``).
        at: Where the check was made, if known.
        value: Passed, failed or errored.
        clues: Diagnostic ``"label = value"`` strings in insertion order.

    Assertions compare by value but are unhashable, since ``clues`` can grow.
    """

    __hash__ = None

    name: str
    at: Location | None = None
    value: AssertionValue = PASSED
    clues: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("assertion name must not be empty")

    @property
    def passed(self) -> bool:
        return self.value.outcome is Outcome.PASSED

    @property
    def failed(self) -> bool:
        return self.value.outcome is Outcome.FAILED

    @property
    def errored(self) -> bool:
        return self.value.outcome is Outcome.ERRORED

    def with_clue(self, value: Any, label: str) -> Assertion:
        self.clues.append(format_clue(value, label))
        return self

    def render(self, styler: Styler | None = None) -> str:
        from asserting.reporting.console import render_assertion

        return render_assertion(self, styler)

    def __str__(self) -> str:
        return self.render()

    def to_record(self) -> AssertionRecord:
        from asserting.results import AssertionRecord, LocationRecord

        return AssertionRecord(
            name=self.name,
            at=LocationRecord(file=self.at.file, line=self.at.line) if self.at else None,
            outcome=self.value.outcome,
            clues=list(self.clues),
            error=self.value.describe(),
        )

    @classmethod
    def from_record(cls, record: AssertionRecord) -> Assertion:
        at = Location(record.at.file, record.at.line) if record.at else None
        if record.outcome is Outcome.ERRORED:
            value = Errored(record.error)
        else:
            value = AssertionValue(record.outcome)
        return cls(name=record.name, at=at, value=value, clues=list(record.clues))
