"""
Result type for numeric parsing.

A ParseResult is a (value, error) pair. An empty error means success and the
value is authoritative; a non-empty error means the parse failed and the value
is always 0.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from .errors import ValueExtractionError

INVALID_ARGUMENT = "Invalid argument"
OUT_OF_RANGE = "Out of range"
NOT_ALL_CHARACTERS_USED = "Not all characters were used in conversion"


class ParseResult(BaseModel):
    """Immutable outcome of a parse: a value or a descriptive error."""

    model_config = ConfigDict(frozen=True, strict=True)

    value: int = 0
    error: str = ""

    @model_validator(mode="after")
    def check_failed_value_is_zero(self) -> ParseResult:
        if self.error and self.value != 0:
            raise ValueError("A failed result must carry value 0")
        return self

    @classmethod
    def ok(cls, value: int) -> ParseResult:
        return cls(value=value)

    @classmethod
    def fail(cls, message: str) -> ParseResult:
        if not message:
            raise ValueError("Failure message must be non-empty")
        return cls(error=message)

    def is_ok(self) -> bool:
        return not self.error

    def is_err(self) -> bool:
        return bool(self.error)

    def unwrap(self) -> int:
        """
        Return the value.

        Raises:
            ValueExtractionError: If the result is a failure.
        """
        if self.error:
            raise ValueExtractionError(self.error)
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        """Return the value, or ``default`` if the result is a failure."""
        return default if self.error else self.value


def has_error(result: ParseResult) -> bool:
    """Check if a result has an error."""
    return result.is_err()


def get_error(result: ParseResult) -> str:
    """Get the error message from a result ("" on success)."""
    return result.error


def get_value(result: ParseResult) -> int:
    """
    Get the value from a result.

    Raises:
        ValueExtractionError: If the result has an error. Check has_error()
            first; calling this on a failure is a programming mistake.
    """
    return result.unwrap()
