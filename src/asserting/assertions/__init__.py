"""Assertion data model and builder."""

from asserting.assertions.base import (
    FAILED,
    PASSED,
    Assertion,
    AssertionValue,
    Errored,
    Location,
    Outcome,
    format_clue,
)
from asserting.assertions.builder import Asserting, BuilderConsumedError

__all__ = [
    "Asserting",
    "Assertion",
    "AssertionValue",
    "BuilderConsumedError",
    "Errored",
    "FAILED",
    "Location",
    "Outcome",
    "PASSED",
    "format_clue",
]
