"""
Core assertion type for conforms.

Provides the Assertion dataclass, the exception boundary and the chaining
helper every built-in assertion is written with.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Union

from .types import MISSING, Err, ErrorKind, Ok, Result, failure, failure_from_exception

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Assertion:
    """
    Immutable assertion node.

    The fundamental building block. Wraps a function ``Any -> Ok | Err`` with
    metadata used for alternation labels and Pydantic generation. Assertions
    hold no state between calls and are safe to share across threads.
    """

    fn: Callable[[Any], Result]
    description: str | None = None
    type_hint: Any = None
    default: Any = MISSING

    def __call__(self, value: Any) -> Result:
        return self.fn(value)

    def described_as(self, label: str) -> Assertion:
        """Return new assertion labelled for use in ``either()``."""
        return replace(self, description=label)


AssertionLike = Union[Assertion, Callable[[Any], Result]]


def guarded(assertion: AssertionLike, value: Any) -> Result:
    """
    Run an assertion, converting anything but a returned result into a failure.

    Returns:
        The assertion's own Ok/Err, or an UNHANDLED_ERROR Err if it raised or
        returned something that is not a result.
    """
    try:
        result = assertion(value)
    except Exception as exc:
        logger.debug("Assertion %r raised; converting to failure", assertion, exc_info=True)
        return failure_from_exception(exc)

    if not isinstance(result, (Ok, Err)):
        return failure(
            ErrorKind.UNHANDLED_ERROR,
            f"Unhandled error: assertion returned {type(result).__name__}, not a result",
        )
    return result


def chain(next: AssertionLike | None, value: Any) -> Result:
    """Hand an already-checked value to the next assertion, or succeed with it."""
    if next is None:
        return Ok(value)
    return next(value)


def hint_of(next: AssertionLike | None, fallback: Any = None) -> Any:
    hint = getattr(next, "type_hint", None)
    return fallback if hint is None else hint
