"""Generate JSON Schema for the YAML results format."""

from __future__ import annotations

import json
from graphlib import TopologicalSorter
from pathlib import Path

from asserting.results import ResultsFile

_REF_PREFIX = "#/$defs/"


def _refs(node: object) -> set[str]:
    if isinstance(node, dict):
        ref = node.get("$ref")
        found = set()
        if isinstance(ref, str) and ref.startswith(_REF_PREFIX):
            found.add(ref.removeprefix(_REF_PREFIX))
        for value in node.values():
            found |= _refs(value)
        return found
    if isinstance(node, list):
        return set().union(*(_refs(value) for value in node))
    return set()


def generate_json_schema() -> dict:
    """Schema for results files, with each ``$defs`` entry after its dependencies."""
    schema = ResultsFile.model_json_schema()
    schema["title"] = "asserting results"
    defs = schema.get("$defs")
    if defs:
        graph = {name: _refs(body) & defs.keys() for name, body in defs.items()}
        schema["$defs"] = {
            name: defs[name] for name in TopologicalSorter(graph).static_order()
        }
    return schema


def write_json_schema(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")
    return path
