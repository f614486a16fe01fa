"""
Type definitions for conforms.

Provides the path model, the ValidationError record and a minimal
Result type (Ok/Err) used as the only return channel of every assertion.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Iterable, TypeVar, Union

T = TypeVar("T")


class Missing(Enum):
    """Sentinel for a value that is absent, e.g. an undeclared dict key."""

    MISSING = auto()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = Missing.MISSING


class ErrorKind(str, Enum):
    """Machine-readable error kinds produced by the built-in assertions."""

    NOT_BOOLEAN = "NOT_BOOLEAN"
    NOT_NUMBER = "NOT_NUMBER"
    LESS_THAN_MIN = "LESS_THAN_MIN"
    GREATER_THAN_MAX = "GREATER_THAN_MAX"
    NOT_STRING = "NOT_STRING"
    FAILED_REGEXP = "FAILED_REGEXP"
    LESS_THAN_MIN_LENGTH = "LESS_THAN_MIN_LENGTH"
    GREATER_THAN_MAX_LENGTH = "GREATER_THAN_MAX_LENGTH"
    LENGTH_NOT_EQUAL = "LENGTH_NOT_EQUAL"
    NOT_ARRAY = "NOT_ARRAY"
    NOT_OBJECT = "NOT_OBJECT"
    NOT_EQUAL = "NOT_EQUAL"
    NOT_STRING_KEY = "NOT_STRING_KEY"
    UNEXPECTED_ADDITIONAL_PROPERTIES = "UNEXPECTED_ADDITIONAL_PROPERTIES"
    NO_MATCH = "NO_MATCH"
    UNHANDLED_ERROR = "UNHANDLED_ERROR"
    MODEL_MISMATCH = "MODEL_MISMATCH"


_BAREWORD = re.compile(r"[$a-z_][$a-z0-9_]*", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class KeyStep:
    """Address of a value under a mapping key."""

    key: str

    def render(self) -> str:
        key = str(self.key)
        if _BAREWORD.fullmatch(key):
            return f".{key}"
        escaped = key.replace("\\", "\\\\").replace("'", "\\'")
        return f"['{escaped}']"


@dataclass(frozen=True, slots=True)
class IndexStep:
    """Address of a value at a list position."""

    index: int

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"Index step must be non-negative, got {self.index}")

    def render(self) -> str:
        return f"[{self.index}]"


PathStep = Union[KeyStep, IndexStep]
Path = tuple[PathStep, ...]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """
    A single validation failure.

    The path starts empty where the failure is detected and gains one step,
    at the front, for every structural level the error is returned through.
    """

    kind: str
    message: str
    path: Path = ()

    def with_step(self, step: PathStep) -> ValidationError:
        """Return a copy of this error with ``step`` prepended to its path."""
        return ValidationError(self.kind, self.message, (step, *self.path))

    def path_string(self, root: str | None = None) -> str:
        from .formatting import format_path

        return format_path(root, self.path)

    def to_string(self, root: str | None = None) -> str:
        return f"{self.path_string(root)}: {self.message}"

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing the validated value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err:
    """Failure result containing one or more validation errors, in discovery order."""

    errors: tuple[ValidationError, ...]

    def __post_init__(self):
        object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise ValueError("Err requires at least one validation error")

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def with_step(self, step: PathStep) -> Err:
        return Err(tuple(error.with_step(step) for error in self.errors))

    def to_string(self, root: str | None = None) -> str:
        from .formatting import format_error_result_message

        return format_error_result_message("", root, self.errors, indent=2)

    def __str__(self) -> str:
        return self.to_string()


Result = Union[Ok[T], Err]
def success(value: T) -> Ok[T]:
    return Ok(value)


def failure(kind: str, message: str) -> Err:
    return Err((ValidationError(kind, message),))


def failure_from_exception(exc: BaseException) -> Err:
    """Convert an exception raised by an assertion into an UNHANDLED_ERROR failure."""
    detail = str(exc) or "Unknown error"
    return failure(ErrorKind.UNHANDLED_ERROR, f"Unhandled error: {detail}")


def add_path_step(step: PathStep, result: Result) -> Result:
    """Prepend ``step`` to every error of a failure; successes pass through."""
    if isinstance(result, Err):
        return result.with_step(step)
    return result


def merge(failures: Iterable[Err]) -> Err:
    """Concatenate the errors of several failures, keeping their order."""
    errors: list[ValidationError] = []
    for result in failures:
        errors.extend(result.errors)
    return Err(tuple(errors))
