"""
Exception types raised by utilkit.
"""


class UtilkitError(Exception):
    """Base class for utilkit errors."""


class ValueExtractionError(UtilkitError, RuntimeError):
    """
    Raised when a value is extracted from a failed result.

    Extracting from a failure is a programming mistake: callers must check
    ``has_error`` first.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
