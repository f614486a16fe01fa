"""
Tests for conforms modifier assertions.
"""

from conforms import (
    MISSING,
    Err,
    Ok,
    defaults_to,
    is_number,
    is_string,
    length_is,
    minimum,
    nullable,
    on_error_defaults_to,
    optional,
)


def spy_on(assertion):
    calls = []

    def wrapped(value):
        calls.append(value)
        return assertion(value)

    return wrapped, calls


class TestOptional:
    def test_missing_skips_next(self):
        inner, calls = spy_on(is_string())
        assert optional(inner)(MISSING) == Ok(MISSING)
        assert calls == []

    def test_other_values_delegate(self):
        inner, calls = spy_on(is_string())
        assert optional(inner)("x") == Ok("x")
        assert isinstance(optional(inner)(None), Err)
        assert calls == ["x", None]


class TestNullable:
    def test_none_skips_next(self):
        inner, calls = spy_on(is_string())
        assert nullable(inner)(None) == Ok(None)
        assert calls == []

    def test_missing_is_not_null(self):
        result = nullable(is_string())(MISSING)
        assert isinstance(result, Err)
        assert result.errors[0].message == "Expected string, got undefined"

    def test_combined(self):
        both = optional(nullable(is_number()))
        assert both(MISSING) == Ok(MISSING)
        assert both(None) == Ok(None)
        assert both(1) == Ok(1)


class TestDefaultsTo:
    def test_substitutes_missing(self):
        assert defaults_to(10, is_number())(MISSING) == Ok(10)
        assert defaults_to(10, is_number())(3) == Ok(3)

    def test_without_next(self):
        assert defaults_to("x")(MISSING) == Ok("x")

    def test_default_is_validated(self):
        result = defaults_to(-5, is_number(minimum(0)))(MISSING)
        assert isinstance(result, Err)
        assert result.errors[0].message == "-5 is less than 0"

    def test_none_is_not_missing(self):
        assert isinstance(defaults_to(1, is_number())(None), Err)


class TestOnErrorDefaultsTo:
    def test_failure_becomes_default(self):
        lang = on_error_defaults_to("en", is_string(length_is(2)))
        assert lang("fr") == Ok("fr")
        assert lang("french") == Ok("en")
        assert lang(42) == Ok("en")

    def test_exception_becomes_default(self):
        def explode(value):
            raise RuntimeError("boom")

        assert on_error_defaults_to(0, explode)("x") == Ok(0)
