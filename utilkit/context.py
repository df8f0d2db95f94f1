"""
Context manager for parsing configuration (e.g., integer width).
"""

from contextlib import contextmanager
from contextvars import ContextVar

DEFAULT_BITS = 32
MAX_BITS = 8192

# Context variable for the signed integer width used by parse_number
_int_bits: ContextVar[int] = ContextVar("int_bits", default=DEFAULT_BITS)


def current_bits() -> int:
    """Return the signed integer width currently in effect."""
    return _int_bits.get()


def check_bits(bits: int) -> int:
    """Validate an integer width, returning it unchanged."""
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise ValueError(f"bits must be an integer, got {bits!r}")
    if not 1 <= bits <= MAX_BITS:
        raise ValueError(f"bits must be an integer in [1, {MAX_BITS}], got {bits!r}")
    return bits


def int_bounds(bits: int) -> tuple[int, int]:
    """Return the (min, max) range of a signed integer of the given width."""
    check_bits(bits)
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


@contextmanager
def number_context(*, bits: int = DEFAULT_BITS):
    """
    Context manager for parsing configuration.

    Args:
        bits: Width of the signed integer that parse_number() targets.
              Values outside its range fail with "Out of range".

    Example:
        from utilkit import number_context, parse_number

        parse_number("3000000000")      # Out of range (32-bit)

        with number_context(bits=64):
            parse_number("3000000000")  # 3000000000
    """
    token = _int_bits.set(check_bits(bits))
    try:
        yield
    finally:
        _int_bits.reset(token)
