"""
Structural assertions for conforms.

These walk into mappings and lists, run one assertion per member, stamp the
member's key or index onto every failure, and report all failures together
in declaration / index order.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence, Union

from .core import Assertion, AssertionLike, chain, guarded, hint_of
from .formatting import format_either_messages
from .types import (
    MISSING,
    Err,
    ErrorKind,
    IndexStep,
    KeyStep,
    Ok,
    Result,
    ValidationError,
    failure,
    merge,
)
from .validators import is_object

ConformanceSpec = Mapping[str, AssertionLike]


def conforms_to(
    spec: ConformanceSpec,
    next: AssertionLike | None = None,
    *,
    allow_additional_properties: bool = True,
) -> Assertion:
    """
    Validate a mapping field by field.

    Every declared field is checked, even after an earlier one failed. Absent
    keys are passed to their assertion as MISSING. The validated value is a
    new dict holding only the declared keys; a key whose validated value is
    MISSING is left out.

    Args:
        spec: Field name -> assertion for that field
        next: Assertion to run on the validated dict
        allow_additional_properties: If False, undeclared keys in the input
            produce one UNEXPECTED_ADDITIONAL_PROPERTIES error

    Usage:
        user = conforms_to({
            "name": is_string(min_length(1)),
            "age": is_number(minimum(0)),
            "email": optional(is_string()),
        })
    """
    fields = dict(spec)

    def check(value: Mapping[str, Any]) -> Result:
        errors: list[ValidationError] = []
        validated: dict[str, Any] = {}

        for key, assertion in fields.items():
            result = guarded(assertion, value.get(key, MISSING))
            if isinstance(result, Err):
                errors.extend(result.with_step(KeyStep(key)).errors)
            elif result.value is not MISSING:
                validated[key] = result.value

        if not allow_additional_properties:
            extra = [str(key) for key in value if key not in fields]
            if extra:
                errors.append(
                    ValidationError(
                        ErrorKind.UNEXPECTED_ADDITIONAL_PROPERTIES,
                        f"Unexpected additional propertie(s): {', '.join(extra)}",
                    )
                )

        if errors:
            return Err(tuple(errors))
        return chain(next, validated)

    return is_object(Assertion(check, type_hint=hint_of(next, dict[str, Any])))


def extend_spec(*specs: ConformanceSpec) -> dict[str, AssertionLike]:
    """
    Merge conformance specs into a new one; later specs win on shared keys.

    Usage:
        named = {"name": is_string()}
        person = extend_spec(named, {"age": is_number()})
    """
    merged: dict[str, AssertionLike] = {}
    for spec in specs:
        merged.update(spec)
    return merged


def each_item(assertion: AssertionLike, next: AssertionLike | None = None) -> Assertion:
    """
    Validate every list element with ``assertion``.

    Expects a list; chain after ``is_array``:
        is_array(each_item(is_string()))
    """

    def check(items: Sequence[Any]) -> Result:
        results = [guarded(assertion, item) for item in items]
        failed = [
            result.with_step(IndexStep(index))
            for index, result in enumerate(results)
            if isinstance(result, Err)
        ]
        if failed:
            return merge(failed)
        return chain(next, [result.value for result in results])

    item_hint = hint_of(assertion)
    own_hint = list[item_hint] if item_hint is not None else list[Any]
    return Assertion(check, type_hint=hint_of(next, own_hint))


def each_value(assertion: AssertionLike, next: AssertionLike | None = None) -> Assertion:
    """
    Validate every value of a string-keyed mapping with ``assertion``.

    Expects a mapping; chain after ``is_map``:
        is_map(each_value(is_number()))
    """

    def check(mapping: Mapping[str, Any]) -> Result:
        return conforms_to({key: assertion for key in mapping}, next)(mapping)

    value_hint = hint_of(assertion)
    own_hint = dict[str, value_hint] if value_hint is not None else dict[str, Any]
    return Assertion(check, type_hint=hint_of(next, own_hint))


def is_map(next: AssertionLike | None = None) -> Assertion:
    """Validate a mapping whose keys are all strings."""

    def check(value: Mapping[Any, Any]) -> Result:
        bad_keys = [repr(key) for key in value if not isinstance(key, str)]
        if bad_keys:
            return failure(
                ErrorKind.NOT_STRING_KEY,
                f"Expected string keys, got: {', '.join(bad_keys)}",
            )
        return chain(next, value)

    return is_object(Assertion(check, type_hint=hint_of(next, dict[str, Any])))


EitherOption = Union[AssertionLike, tuple[str, AssertionLike]]


def _labelled(option: EitherOption) -> tuple[str, AssertionLike]:
    if isinstance(option, tuple):
        label, assertion = option
        return label, assertion
    label = getattr(option, "description", None)
    if label is None:
        raise TypeError(
            "either() options need a label: pass (label, assertion) "
            "or assertion.described_as(label)"
        )
    return label, option


def either(*options: EitherOption) -> Assertion:
    """
    Try each assertion in order and return the first success.

    If every option fails, return one NO_MATCH error listing each option's
    errors under its label.

    The nested errors are rendered into the NO_MATCH message when the
    alternation fails, using the root label active at that moment; a later
    ``to_string(root)`` only changes the path in front of the NO_MATCH line.

    Usage:
        either(
            ("a string", is_string()),
            ("a list of strings", is_array(each_item(is_string()))),
        )
    """
    if not options:
        raise ValueError("either() needs at least one assertion")
    labelled = [_labelled(option) for option in options]

    def check(value: Any) -> Result:
        attempts: list[tuple[str, tuple[ValidationError, ...]]] = []
        for label, assertion in labelled:
            result = guarded(assertion, value)
            if isinstance(result, Ok):
                return result
            attempts.append((label, result.errors))

        return failure(
            ErrorKind.NO_MATCH,
            "No match found - the following assertions failed:\n"
            + format_either_messages(attempts),
        )

    hints = [hint_of(assertion) for _, assertion in labelled]
    type_hint = Union[tuple(hints)] if None not in hints else None
    return Assertion(check, type_hint=type_hint)
