"""
Tests for conforms.types: paths, errors and results.
"""

import pytest

from conforms import (
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
    validation_context,
)


class TestPathSteps:
    def test_bareword_key(self):
        assert KeyStep("name").render() == ".name"
        assert KeyStep("$ref").render() == ".$ref"
        assert KeyStep("_id2").render() == "._id2"

    def test_key_needing_escape(self):
        assert KeyStep("first name").render() == "['first name']"
        assert KeyStep("2nd").render() == "['2nd']"
        assert KeyStep("it's").render() == "['it\\'s']"
        assert KeyStep("a\\b").render() == "['a\\\\b']"

    def test_trailing_newline_is_not_a_bareword(self):
        assert KeyStep("a\n").render() == "['a\n']"
        assert KeyStep("\nname").render() == "['\nname']"

    def test_index(self):
        assert IndexStep(3).render() == "[3]"

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            IndexStep(-1)


class TestValidationError:
    def test_with_step_prepends(self):
        error = ValidationError(ErrorKind.NOT_STRING, "Expected string, got number")
        nested = error.with_step(IndexStep(1)).with_step(KeyStep("tags"))
        assert nested.path == (KeyStep("tags"), IndexStep(1))
        assert error.path == ()

    def test_to_string(self):
        error = ValidationError("NOT_STRING", "bad", (KeyStep("tags"), IndexStep(1)))
        assert error.path_string() == "$.tags[1]"
        assert error.to_string("$root") == "$root.tags[1]: bad"
        assert str(error) == "$.tags[1]: bad"


class TestResults:
    def test_success(self):
        result = success(5)
        assert result == Ok(5)
        assert result.is_ok()
        assert not result.is_err()

    def test_failure(self):
        result = failure(ErrorKind.NOT_NUMBER, "Expected number, got string")
        assert result.is_err()
        assert len(result.errors) == 1
        assert result.errors[0].kind == "NOT_NUMBER"
        assert result.errors[0].path == ()

    def test_err_never_empty(self):
        with pytest.raises(ValueError):
            Err(())

    def test_failure_from_exception(self):
        result = failure_from_exception(RuntimeError("boom"))
        assert result.errors[0].kind == ErrorKind.UNHANDLED_ERROR
        assert result.errors[0].message == "Unhandled error: boom"

    def test_failure_from_exception_without_text(self):
        result = failure_from_exception(RuntimeError())
        assert result.errors[0].message == "Unhandled error: Unknown error"

    def test_add_path_step(self):
        result = add_path_step(KeyStep("a"), failure("X", "x"))
        assert result.errors[0].path == (KeyStep("a"),)
        assert add_path_step(KeyStep("a"), Ok(1)) == Ok(1)

    def test_merge_keeps_order(self):
        merged = merge([failure("A", "a"), Err((ValidationError("B", "b"), ValidationError("C", "c")))])
        assert [e.kind for e in merged.errors] == ["A", "B", "C"]

    def test_to_string_singular(self):
        result = failure("X", "bad").with_step(KeyStep("name"))
        assert str(result) == "1 validation error:\n  $.name: bad"

    def test_to_string_plural(self):
        result = merge([
            failure("A", "first").with_step(KeyStep("a")),
            failure("B", "second").with_step(IndexStep(0)),
        ])
        assert result.to_string() == "2 validation errors:\n  $.a: first\n  $[0]: second"
        assert result.to_string("data") == "2 validation errors:\n  data.a: first\n  data[0]: second"

    def test_root_label_from_context(self):
        result = failure("X", "bad").with_step(KeyStep("name"))
        with validation_context(root_label="$root"):
            assert str(result) == "1 validation error:\n  $root.name: bad"
            assert result.to_string("body") == "1 validation error:\n  body.name: bad"
        assert str(result) == "1 validation error:\n  $.name: bad"


class TestMissing:
    def test_missing_is_falsy_singleton(self):
        assert not MISSING
        assert repr(MISSING) == "MISSING"
