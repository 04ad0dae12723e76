from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from junitparser import Error, Failure, JUnitXml, TestCase, TestSuite

if TYPE_CHECKING:
    from asserting.assertions.base import Assertion
    from asserting.suite import Suite

_logger = logging.getLogger(__name__)


def _diagnostics(assertion: Assertion) -> list[str]:
    lines = []
    if assertion.at is not None:
        lines.append(str(assertion.at))
    lines.extend(assertion.clues)
    return lines


def _build_case(suite_name: str, assertion: Assertion) -> TestCase:
    case = TestCase(assertion.name)
    case.classname = suite_name
    if assertion.errored:
        description = assertion.value.describe()
        error = Error(description)
        error.text = "\n".join(_diagnostics(assertion) + [f"error = {description}"])
        case.result = error
    elif assertion.failed:
        lines = _diagnostics(assertion)
        failure = Failure(lines[0] if lines else f"{assertion.name} failed")
        failure.text = "\n".join(lines)
        case.result = failure
    return case


def write_junit(
    path: Path, suites: list[Suite], logger: logging.Logger | None = None
) -> Path:
    """Write junit.xml with one testsuite per suite, return path."""
    logger = logger or _logger
    xml = JUnitXml()

    for suite in suites:
        junit_suite = TestSuite(suite.name)
        for assertion in suite.assertions:
            junit_suite.add_testcase(_build_case(suite.name, assertion))
        # Use append (not +=) to keep each suite separate
        xml.append(junit_suite)

    xml.update_statistics()
    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    logger.debug(f"Wrote JUnit report for {len(suites)} suites to {path}")
    return path
