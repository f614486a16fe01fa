"""
conforms - composable assertions for untrusted data.

Usage:
    from conforms import conforms_to, is_number, is_string, minimum, min_length, validate

    user = conforms_to({
        "name": is_string(min_length(1)),
        "age": is_number(minimum(0)),
    })

    result = validate({"name": "", "age": -1}, user)
    print(result)
    # 2 validation errors:
    #   $.name: Length 0 is less than 1
    #   $.age: -1 is less than 0
"""

import logging

from .context import get_root_label, validation_context
from .core import Assertion, guarded
from .modifiers import defaults_to, nullable, on_error_defaults_to, optional
from .schema import from_model, to_pydantic, validate
from .structural import conforms_to, each_item, each_value, either, extend_spec, is_map
from .types import (
    MISSING,
    Err,
    ErrorKind,
    IndexStep,
    KeyStep,
    Ok,
    ValidationError,
    add_path_step,
    failure,
    failure_from_exception,
    merge,
    success,
)
from .validators import (
    equals,
    is_array,
    is_boolean,
    is_number,
    is_object,
    is_string,
    length_is,
    matches,
    max_length,
    max_value,
    maximum,
    min_length,
    min_value,
    minimum,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Result types
    "Ok",
    "Err",
    "ValidationError",
    "ErrorKind",
    "KeyStep",
    "IndexStep",
    "MISSING",
    "success",
    "failure",
    "failure_from_exception",
    "add_path_step",
    "merge",
    # Core
    "Assertion",
    "guarded",
    "validate",
    # Primitives
    "is_boolean",
    "is_number",
    "is_string",
    "is_object",
    "is_array",
    "minimum",
    "maximum",
    "min_value",
    "max_value",
    "min_length",
    "max_length",
    "length_is",
    "matches",
    "equals",
    # Modifiers
    "optional",
    "nullable",
    "defaults_to",
    "on_error_defaults_to",
    # Structural
    "conforms_to",
    "extend_spec",
    "each_item",
    "each_value",
    "is_map",
    "either",
    # Pydantic
    "from_model",
    "to_pydantic",
    # Configuration
    "validation_context",
    "get_root_label",
]
