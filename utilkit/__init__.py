from .container import Container, Membership
from .context import current_bits, int_bounds, number_context
from .demo import ItemList
from .errors import UtilkitError, ValueExtractionError
from .parser import parse_number
from .result import (
    INVALID_ARGUMENT,
    NOT_ALL_CHARACTERS_USED,
    OUT_OF_RANGE,
    ParseResult,
    get_error,
    get_value,
    has_error,
)

__all__ = [
    "parse_number",
    "ParseResult",
    "has_error",
    "get_error",
    "get_value",
    "INVALID_ARGUMENT",
    "OUT_OF_RANGE",
    "NOT_ALL_CHARACTERS_USED",
    "Container",
    "Membership",
    "ItemList",
    "number_context",
    "current_bits",
    "int_bounds",
    "UtilkitError",
    "ValueExtractionError",
]
