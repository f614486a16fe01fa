"""
Built-in primitive assertions for conforms.

Provides factory functions that return Assertion instances. Every factory
takes an optional ``next`` assertion that only runs once its own check passed.

Kind checks (``is_*``) verify the shape of any input. Bound and length
checks assume the right shape already arrived and are meant to be chained
after a kind check:

    is_string(min_length(1, matches(r"^[a-z]+$")))
    is_number(minimum(0, maximum(100)))
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Callable

from .core import Assertion, AssertionLike, chain, hint_of
from .formatting import describe_kind, display_value
from .types import ErrorKind, Result, failure, success


def _kind_assertion(
    kind: str,
    expected: str,
    predicate: Callable[[Any], bool],
    type_hint: Any,
    next: AssertionLike | None,
) -> Assertion:
    def check(value: Any) -> Result:
        if not predicate(value):
            return failure(kind, f"Expected {expected}, got {describe_kind(value)}")
        return chain(next, value)

    return Assertion(check, type_hint=hint_of(next, type_hint))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_boolean(next: AssertionLike | None = None) -> Assertion:
    return _kind_assertion(
        ErrorKind.NOT_BOOLEAN, "boolean", lambda x: isinstance(x, bool), bool, next
    )


def is_number(next: AssertionLike | None = None) -> Assertion:
    """Validate an int or float. Booleans are not numbers."""
    return _kind_assertion(ErrorKind.NOT_NUMBER, "number", _is_number, int | float, next)


def is_string(next: AssertionLike | None = None) -> Assertion:
    return _kind_assertion(
        ErrorKind.NOT_STRING, "string", lambda x: isinstance(x, str), str, next
    )


def is_object(next: AssertionLike | None = None) -> Assertion:
    """Validate a mapping. Lists and None are not objects."""
    return _kind_assertion(
        ErrorKind.NOT_OBJECT,
        "object",
        lambda x: isinstance(x, Mapping),
        dict[str, Any],
        next,
    )


def is_array(next: AssertionLike | None = None) -> Assertion:
    """Validate a list or tuple."""
    return _kind_assertion(
        ErrorKind.NOT_ARRAY,
        "array",
        lambda x: isinstance(x, (list, tuple)),
        list[Any],
        next,
    )


def minimum(bound: int | float, next: AssertionLike | None = None) -> Assertion:
    """
    Validate a number is not below ``bound`` (inclusive).

    Usage:
        is_number(minimum(0))
    """

    def check(value: Any) -> Result:
        if value < bound:
            return failure(ErrorKind.LESS_THAN_MIN, f"{value} is less than {bound}")
        return chain(next, value)

    return Assertion(check, type_hint=hint_of(next))


def maximum(bound: int | float, next: AssertionLike | None = None) -> Assertion:
    """Validate a number is not above ``bound`` (inclusive)."""

    def check(value: Any) -> Result:
        if value > bound:
            return failure(ErrorKind.GREATER_THAN_MAX, f"{value} is greater than {bound}")
        return chain(next, value)

    return Assertion(check, type_hint=hint_of(next))


min_value = minimum
max_value = maximum


def _check_length_bound(length: int) -> None:
    if length < 0:
        raise ValueError(f"Length bound must be non-negative, got {length}")


def min_length(length: int, next: AssertionLike | None = None) -> Assertion:
    """
    Validate a string or list has at least ``length`` items.

    Usage:
        is_string(min_length(1))
        is_array(min_length(1, each_item(is_number())))
    """
    _check_length_bound(length)

    def check(value: Any) -> Result:
        if len(value) < length:
            return failure(
                ErrorKind.LESS_THAN_MIN_LENGTH,
                f"Length {len(value)} is less than {length}",
            )
        return chain(next, value)

    return Assertion(check, type_hint=hint_of(next))


def max_length(length: int, next: AssertionLike | None = None) -> Assertion:
    _check_length_bound(length)

    def check(value: Any) -> Result:
        if len(value) > length:
            return failure(
                ErrorKind.GREATER_THAN_MAX_LENGTH,
                f"Length {len(value)} is greater than {length}",
            )
        return chain(next, value)

    return Assertion(check, type_hint=hint_of(next))


def length_is(length: int, next: AssertionLike | None = None) -> Assertion:
    _check_length_bound(length)

    def check(value: Any) -> Result:
        if len(value) != length:
            return failure(
                ErrorKind.LENGTH_NOT_EQUAL,
                f"Length {len(value)} is not equal to {length}",
            )
        return chain(next, value)

    return Assertion(check, type_hint=hint_of(next))


def matches(pattern: str | re.Pattern[str], next: AssertionLike | None = None) -> Assertion:
    """
    Validate a string contains a match for ``pattern`` (``re.search``).

    Usage:
        is_string(matches(r"^[a-z]+$"))
        is_string(matches(re.compile(r"\\d{3}-\\d{4}")))
    """
    compiled = re.compile(pattern)

    def check(value: Any) -> Result:
        if compiled.search(value) is None:
            return failure(
                ErrorKind.FAILED_REGEXP,
                f"Failed regular expression {compiled.pattern}",
            )
        return chain(next, value)

    return Assertion(check, type_hint=hint_of(next))


def _same_value(expected: Any, actual: Any) -> bool:
    # True == 1 in Python; JSON booleans and numbers stay distinct
    if isinstance(expected, bool) or isinstance(actual, bool):
        return isinstance(expected, bool) and isinstance(actual, bool) and expected is actual
    return bool(expected == actual)


def equals(value: Any, *values: Any) -> Assertion:
    """
    Validate the value equals one of a fixed set of values.

    Usage:
        equals("active")
        equals("active", "inactive", "pending")
    """
    allowed = (value, *values)

    def check(arg: Any) -> Result:
        for candidate in allowed:
            if _same_value(candidate, arg):
                return success(arg)

        if len(allowed) == 1:
            message = f"'{display_value(arg)}' does not equal '{display_value(allowed[0])}'"
        else:
            shown = ", ".join(display_value(v) for v in allowed)
            message = f"'{display_value(arg)}' not one of: {shown}"
        return failure(ErrorKind.NOT_EQUAL, message)

    return Assertion(check)
