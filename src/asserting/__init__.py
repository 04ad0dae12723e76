"""Test assertions that remember what they checked and why it failed."""

from asserting.assertions import (
    FAILED,
    PASSED,
    Asserting,
    Assertion,
    AssertionValue,
    BuilderConsumedError,
    Errored,
    Location,
    Outcome,
)
from asserting.capture import assert_equal, assert_that
from asserting.reporting.console import ColoredStyler, PlainStyler, StyleMode, get_styler
from asserting.suite import Suite

__all__ = [
    "Asserting",
    "Assertion",
    "AssertionValue",
    "BuilderConsumedError",
    "ColoredStyler",
    "Errored",
    "FAILED",
    "Location",
    "Outcome",
    "PASSED",
    "PlainStyler",
    "StyleMode",
    "Suite",
    "assert_equal",
    "assert_that",
    "get_styler",
]
