"""
Text formatting helpers for validation errors.

Besides the renderers used by the results and assertions, ``concatenate_items``
and ``format_error_result_message`` are public helpers for callers building
their own report text, e.g. prefixing a failure with the request it came from.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Sequence

from .context import get_root_label
from .types import MISSING, PathStep, ValidationError


def pluralise(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def increase_indent(text: str, indent: int) -> str:
    """Indent every line of ``text`` by ``indent`` spaces."""
    padding = " " * indent
    return padding + text.replace("\n", "\n" + padding)


def concatenate_items(items: Sequence[str], conjunction: str = "and") -> str:
    """
    Join items into an English list.

    Examples:
        concatenate_items(["a"])            -> "a"
        concatenate_items(["a", "b"])       -> "a and b"
        concatenate_items(["a", "b", "c"])  -> "a, b, and c"
    """
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} {conjunction} {items[1]}"
    return f"{', '.join(items[:-1])}, {conjunction} {items[-1]}"


def format_path(root: str | None, path: Iterable[PathStep]) -> str:
    if root is None:
        root = get_root_label()
    return root + "".join(step.render() for step in path)


def describe_kind(value: Any) -> str:
    """Name the JSON-ish kind of a value for "Expected X, got Y" messages."""
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def format_error_result_message(
    prefix: str, root: str | None, errors: Sequence[ValidationError], indent: int = 4
) -> str:
    header = f"{prefix}{pluralise(len(errors), 'validation error', 'validation errors')}:"
    body = "\n".join(increase_indent(error.to_string(root), indent) for error in errors)
    return f"{header}\n{body}"


def format_either_messages(
    attempts: Sequence[tuple[str, Sequence[ValidationError]]],
) -> str:
    """Render the failed attempts of an alternation, one labelled block each."""
    blocks = []
    for label, errors in attempts:
        count = pluralise(len(errors), "validation error", "validation errors")
        lines = "\n".join(increase_indent(error.to_string(), 4) for error in errors)
        blocks.append(increase_indent(f"Not {label}, due to {count}:\n{lines}", 4))
    return "\n".join(blocks)


def display_value(value: Any) -> str:
    """Show a value in a message, naming the sentinels the JSON way."""
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
