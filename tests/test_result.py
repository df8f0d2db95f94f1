"""
Tests for utilkit.result.
"""

import pytest
from pydantic import ValidationError

from utilkit import (
    OUT_OF_RANGE,
    ParseResult,
    UtilkitError,
    ValueExtractionError,
    get_error,
    get_value,
    has_error,
)


class TestParseResult:
    def test_ok(self):
        result = ParseResult.ok(5)
        assert result.is_ok()
        assert not result.is_err()
        assert result.unwrap() == 5
        assert result.error == ""

    def test_fail(self):
        result = ParseResult.fail(OUT_OF_RANGE)
        assert result.is_err()
        assert result.value == 0
        assert result.unwrap_or(-1) == -1

    def test_fail_requires_message(self):
        with pytest.raises(ValueError):
            ParseResult.fail("")

    def test_failed_value_must_be_zero(self):
        with pytest.raises(ValidationError):
            ParseResult(value=3, error="Invalid argument")

    def test_immutable(self):
        result = ParseResult.ok(1)
        with pytest.raises(ValidationError):
            result.value = 2

    def test_equality(self):
        assert ParseResult.ok(1) == ParseResult(value=1, error="")
        assert ParseResult.ok(1) != ParseResult.ok(2)


class TestAccessors:
    def test_has_error_and_get_error(self):
        assert not has_error(ParseResult.ok(0))
        failed = ParseResult.fail("Invalid argument")
        assert has_error(failed)
        assert get_error(failed) == "Invalid argument"

    def test_get_value_raises_on_failure(self):
        with pytest.raises(ValueExtractionError, match="Out of range"):
            get_value(ParseResult.fail(OUT_OF_RANGE))

    def test_extraction_error_hierarchy(self):
        with pytest.raises(RuntimeError):
            ParseResult.fail(OUT_OF_RANGE).unwrap()
        with pytest.raises(UtilkitError) as exc_info:
            ParseResult.fail(OUT_OF_RANGE).unwrap()
        assert exc_info.value.message == OUT_OF_RANGE
