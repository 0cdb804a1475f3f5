"""
Exception hierarchy for the invoice generator.
"""

from typing import Optional


class InvoiceError(Exception):
    """Base class for every error raised by the invoice generator."""


class ParseError(InvoiceError, ValueError):
    """A numeric field is not a valid decimal string."""

    def __init__(self, field: str, value: Optional[str], reason: str = "not a valid decimal number"):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}: {value!r} is {reason}" if value is not None else f"{field}: {reason}")


class NotPreparedError(InvoiceError, RuntimeError):
    """A computation was requested on a line item that was never prepared."""


class DocumentError(InvoiceError, ValueError):
    """The input document or its options are malformed."""
