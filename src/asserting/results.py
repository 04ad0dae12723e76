"""YAML results files: saved suites that can be re-rendered later."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from asserting.assertions.base import Outcome

if TYPE_CHECKING:
    from asserting.suite import Suite

_logger = logging.getLogger(__name__)


class LocationRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file: str
    line: int

    @field_validator("line")
    @classmethod
    def line_must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("line must be non-negative")
        return v


class AssertionRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    at: LocationRecord | None = None
    outcome: Outcome
    clues: list[str] = []
    error: str | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("name must not be empty")
        return v

    @model_validator(mode="after")
    def error_matches_outcome(self) -> "AssertionRecord":
        if self.outcome is Outcome.ERRORED and self.error is None:
            raise ValueError(f"assertion '{self.name}' is errored but has no error")
        if self.outcome is not Outcome.ERRORED and self.error is not None:
            raise ValueError(
                f"assertion '{self.name}' is {self.outcome.value} and cannot carry an error"
            )
        return self


class SuiteRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    assertions: list[AssertionRecord] = []


class ResultsFile(BaseModel):
    model_config = ConfigDict(extra="forbid")
    suites: list[SuiteRecord]


def load_results(path: Path, logger: logging.Logger | None = None) -> list[Suite]:
    """Load and validate suites from a YAML results file.

    Raises ValueError when the top level of the file is not a mapping.
    """
    from asserting.suite import Suite

    logger = logger or _logger
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(
            f"expected a mapping with a 'suites' key, got {type(raw).__name__}"
        )

    results = ResultsFile(**raw)
    logger.debug(f"Loaded {len(results.suites)} suites from {path}")
    return [Suite.from_record(record) for record in results.suites]


def write_results(path: Path, suites: list[Suite]) -> Path:
    """Write *suites* to *path* as YAML, return path."""
    results = ResultsFile(suites=[suite.to_record() for suite in suites])
    path.parent.mkdir(parents=True, exist_ok=True)
    data = results.model_dump(mode="json", exclude_none=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False, allow_unicode=True))
    _logger.debug(f"Wrote {len(suites)} suites to {path}")
    return path
