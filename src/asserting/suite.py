"""Named collections of assertions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator

from asserting.assertions.base import Assertion, Outcome

if TYPE_CHECKING:
    from asserting.reporting.console import Styler
    from asserting.results import SuiteRecord


@dataclass
class Suite:
    """A named, ordered holder of assertions.

    A suite is not thread-safe. Give each execution context its own suite
    and combine them afterwards with :meth:`extend`.
    """

    __test__ = False

    name: str
    assertions: list[Assertion] = field(default_factory=list)

    def add(self, assertion: Assertion) -> Assertion:
        self.assertions.append(assertion)
        return assertion

    def extend(self, assertions: Iterable[Assertion]) -> None:
        self.assertions.extend(assertions)

    def __iter__(self) -> Iterator[Assertion]:
        return iter(self.assertions)

    def __len__(self) -> int:
        return len(self.assertions)

    @property
    def passed(self) -> bool:
        return all(a.passed for a in self.assertions)

    def failures(self) -> list[Assertion]:
        return [a for a in self.assertions if not a.passed]

    def counts(self) -> dict[str, int]:
        counts = {outcome.value: 0 for outcome in Outcome}
        for assertion in self.assertions:
            counts[assertion.value.outcome.value] += 1
        return counts

    def render(self, styler: Styler | None = None) -> str:
        from asserting.reporting.console import render_suite

        return render_suite(self, styler)

    def to_record(self) -> SuiteRecord:
        from asserting.results import SuiteRecord

        return SuiteRecord(
            name=self.name, assertions=[a.to_record() for a in self.assertions]
        )

    @classmethod
    def from_record(cls, record: SuiteRecord) -> Suite:
        return cls(
            name=record.name,
            assertions=[Assertion.from_record(r) for r in record.assertions],
        )
