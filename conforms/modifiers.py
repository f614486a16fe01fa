"""
Modifier assertions for conforms.

Wrap an assertion to change how it treats missing, null or failing input.
"""

from __future__ import annotations

from typing import Any
from typing import Optional as TypingOptional

from .core import Assertion, AssertionLike, chain, guarded, hint_of
from .types import MISSING, Err, Result, success


def _optional_hint(next: AssertionLike) -> Any:
    hint = hint_of(next)
    return TypingOptional[hint] if hint is not None else None


def optional(next: AssertionLike) -> Assertion:
    """
    Accept a missing value, validate anything else with ``next``.

    Usage:
        conforms_to({"nickname": optional(is_string())})
    """

    def check(value: Any) -> Result:
        if value is MISSING:
            return success(MISSING)
        return next(value)

    return Assertion(
        check,
        description=getattr(next, "description", None),
        type_hint=_optional_hint(next),
        default=None,
    )


def nullable(next: AssertionLike) -> Assertion:
    """Accept None, validate anything else with ``next``."""

    def check(value: Any) -> Result:
        if value is None:
            return success(None)
        return next(value)

    return Assertion(
        check,
        description=getattr(next, "description", None),
        type_hint=_optional_hint(next),
        default=None,
    )


def defaults_to(default: Any, next: AssertionLike | None = None) -> Assertion:
    """
    Substitute ``default`` for a missing value, then continue the chain.

    The default itself goes through ``next`` and can fail validation.

    Usage:
        defaults_to(10, is_number(minimum(1)))
    """

    def check(value: Any) -> Result:
        if value is MISSING:
            value = default
        return chain(next, value)

    return Assertion(check, type_hint=hint_of(next), default=default)


def on_error_defaults_to(default: Any, next: AssertionLike) -> Assertion:
    """
    Run ``next``; on any failure (or exception) succeed with ``default`` instead.

    The discarded errors never reach the caller.

    Usage:
        on_error_defaults_to("en", is_string(length_is(2)))
    """

    def check(value: Any) -> Result:
        result = guarded(next, value)
        if isinstance(result, Err):
            return success(default)
        return result

    return Assertion(check, type_hint=hint_of(next), default=default)
