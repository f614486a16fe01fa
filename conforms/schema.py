"""
Schema operations for conforms.

Provides validate(), from_model() and to_pydantic() functions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, create_model
from pydantic import ValidationError as PydanticValidationError

from .core import Assertion, AssertionLike, chain, guarded
from .structural import ConformanceSpec, conforms_to
from .types import MISSING, Err, ErrorKind, IndexStep, KeyStep, Result, ValidationError


def validate(data: Any, assertion: AssertionLike | ConformanceSpec) -> Result:
    """
    Validate data against an assertion.

    Never raises for bad data or a misbehaving assertion; an exception raised
    inside the assertion comes back as an UNHANDLED_ERROR failure.

    Args:
        data: The untrusted value, e.g. parsed JSON
        assertion: An assertion, or a dict of field assertions (shorthand for
            ``conforms_to(spec)``)

    Returns:
        Ok(validated) if validation passes
        Err(errors) if validation fails

    Usage:
        result = validate(payload, conforms_to({
            "name": is_string(min_length(1)),
            "age": is_number(minimum(0)),
        }))
        if result.is_err():
            print(result)
    """
    if isinstance(assertion, Mapping):
        assertion = conforms_to(assertion)
    return guarded(assertion, data)


def _from_pydantic_error(error: Mapping[str, Any]) -> ValidationError:
    path = tuple(
        IndexStep(part) if isinstance(part, int) else KeyStep(str(part))
        for part in error.get("loc", ())
    )
    return ValidationError(ErrorKind.MODEL_MISMATCH, error["msg"], path)


def from_model(model: type[BaseModel], next: AssertionLike | None = None) -> Assertion:
    """
    Validate with a Pydantic model; each Pydantic error keeps its location.

    Usage:
        class Address(BaseModel):
            city: str

        conforms_to({"address": from_model(Address)})
    """

    def check(value: Any) -> Result:
        if value is MISSING:
            value = None
        try:
            instance = model.model_validate(value)
        except PydanticValidationError as exc:
            return Err(tuple(_from_pydantic_error(error) for error in exc.errors()))
        return chain(next, instance)

    return Assertion(check, description=model.__name__, type_hint=model)


def to_pydantic(name: str, spec: ConformanceSpec) -> type[BaseModel]:
    """
    Compile a conformance spec to a Pydantic model.

    Field types come from each assertion's type hint (``Any`` when unknown).
    Fields built with ``optional``/``nullable`` default to None, fields built
    with ``defaults_to``/``on_error_defaults_to`` default to their value, and
    every other field is required.

    Usage:
        User = to_pydantic("User", {
            "name": is_string(),
            "email": optional(is_string()),
        })
        user = User(name="Alice")
    """
    fields: dict[str, Any] = {}

    for key, assertion in spec.items():
        type_hint = getattr(assertion, "type_hint", None)
        default = getattr(assertion, "default", MISSING)
        fields[key] = (
            Any if type_hint is None else type_hint,
            ... if default is MISSING else default,
        )

    return create_model(name, **fields)
