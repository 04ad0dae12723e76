from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

from asserting.reporting.console import StyleMode


class ReportConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    style: StyleMode = StyleMode.AUTO
    junit: str | None = None
    verbose: bool = False

    @field_validator("junit")
    @classmethod
    def expand_junit_path(cls, v: str | None) -> str | None:
        """Expand ${VAR} references in the JUnit output path.

        A reference to an unset variable without a default is an error, so a
        report never lands in a path like ``/junit.xml`` by accident.
        """
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as exc:
            raise ValueError(f"junit path '{v}' references an unset variable: {exc}")


def load_config(path: Path) -> ReportConfig:
    """Load and validate a report config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"expected a mapping of settings, got {type(raw).__name__}")

    config = ReportConfig(**raw)

    # Resolve a relative junit path relative to config file location
    if config.junit is not None:
        junit_path = Path(config.junit)
        if not junit_path.is_absolute():
            config.junit = str((config_dir / junit_path).resolve())

    return config
