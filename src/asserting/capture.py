"""Capture the source text of checked expressions at the call site.

``assert_that(x > 1, x)`` needs to know that it was handed ``x > 1`` and
``x``, not just ``True`` and ``3``. Python evaluates arguments before the
call, so the text is recovered afterwards: the caller's file is parsed with
:mod:`ast` and the call node is found by the position of the call
instruction that is currently executing in the caller's frame.
"""

from __future__ import annotations

import ast
import inspect
import linecache
import logging
from functools import lru_cache
from types import FrameType
from typing import Any, NamedTuple

from asserting.assertions.base import Assertion
from asserting.assertions.builder import Asserting

logger = logging.getLogger(__name__)


class CallSite(NamedTuple):
    file: str
    line: int
    args: list[str | None] | None


@lru_cache(maxsize=128)
def _parse_source(source: str) -> ast.Module | None:
    try:
        return ast.parse(source)
    except SyntaxError:
        return None


def _callee_name(node: ast.Call) -> str | None:
    if isinstance(node.func, ast.Name):
        return node.func.id
    if isinstance(node.func, ast.Attribute):
        return node.func.attr
    return None


def _find_call(tree: ast.Module, frame: FrameType, func_name: str) -> ast.Call | None:
    positions = inspect.getframeinfo(frame, context=0).positions
    line = frame.f_lineno
    fallback = None
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        if positions is not None and positions.col_offset is not None:
            if (
                node.lineno == positions.lineno
                and node.col_offset == positions.col_offset
                and node.end_lineno == positions.end_lineno
                and node.end_col_offset == positions.end_col_offset
            ):
                return node
        if (
            fallback is None
            and node.lineno <= line <= (node.end_lineno or node.lineno)
            and _callee_name(node) == func_name
        ):
            fallback = node
    return fallback


def call_site(frame: FrameType, func_name: str) -> CallSite:
    """Locate the call to *func_name* running in *frame*.

    ``args`` holds the source text of each positional argument, or ``None``
    when the source could not be recovered. Starred arguments appear as
    ``None`` entries since their source does not map to single values.
    """
    file = frame.f_code.co_filename
    line = frame.f_lineno
    source = "".join(linecache.getlines(file, frame.f_globals))
    tree = _parse_source(source) if source else None
    if tree is None:
        logger.warning(f"Source unavailable for {func_name} at {file}:{line}")
        return CallSite(file, line, None)

    node = _find_call(tree, frame, func_name)
    if node is None:
        logger.warning(f"Could not locate {func_name} call at {file}:{line}")
        return CallSite(file, line, None)
    args: list[str | None] = []
    for arg in node.args:
        if isinstance(arg, ast.Starred):
            logger.debug(f"Starred argument in {func_name} call at {file}:{line}")
            args.append(None)
        else:
            args.append(ast.get_source_segment(source, arg) or ast.unparse(arg))
    return CallSite(file, node.lineno, args)


def _caller(depth: int = 2) -> FrameType:
    frame = inspect.currentframe()
    for _ in range(depth):
        frame = frame.f_back
    return frame


def assert_that(condition: Any, *clues: Any, **named_clues: Any) -> Assertion:
    """Check *condition* and record it with its source text.

    Extra positional arguments become clues labelled with their own source
    text; keyword arguments become clues labelled with the keyword::

        assert_that(total == 3, total, items=items)

    produces an assertion named ``"total == 3"`` carrying the clues
    ``"total = 2"`` and ``"items = [1, 1]"``.
    """
    frame = _caller()
    try:
        site = call_site(frame, "assert_that")
    finally:
        del frame

    name = site.args[0] if site.args else None
    if name is None:
        name = f"<expression at {site.file}:{site.line}>"

    labels = site.args[1:] if site.args else []
    if len(labels) != len(clues) or None in labels:
        # a starred argument hides which source text belongs to which value
        labels = [f"clue[{i}]" for i in range(len(clues))]

    builder = Asserting.that(name).at(site.file, site.line)
    for value, label in zip(clues, labels):
        builder.with_clue(value, label)
    for label, value in named_clues.items():
        builder.with_clue(value, label)
    return builder.is_true(condition)


def assert_equal(left: Any, right: Any) -> Assertion:
    """Check ``left == right``, recording both operands as clues."""
    frame = _caller()
    try:
        site = call_site(frame, "assert_equal")
    finally:
        del frame

    if site.args is None or len(site.args) != 2 or None in site.args:
        left_label, right_label = "left", "right"
    else:
        left_label, right_label = site.args

    return (
        Asserting.that(f"{left_label} == {right_label}")
        .at(site.file, site.line)
        .with_clue(left, left_label)
        .with_clue(right, right_label)
        .is_true(left == right)
    )
