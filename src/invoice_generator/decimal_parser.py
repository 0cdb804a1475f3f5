#!/usr/bin/env python3
"""
Strict decimal parsing for the string-encoded numeric fields of a line item.
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from .exceptions import ParseError

logger = logging.getLogger(__name__)

# Optional sign, digits, optional fractional part. No exponent, no separators.
DECIMAL_PATTERN = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)', re.ASCII)


def parse(value: Optional[str], field: str = "value") -> Decimal:
    """
    Parse a decimal numeral without losing precision.

    Args:
        value: The raw string, e.g. "10.00" or "-3.5"
        field: Field name reported in the error message

    Returns:
        The exact Decimal value of the string

    Raises:
        ParseError: If the string is empty or is not a plain decimal numeral
    """
    if value is None or value == "":
        raise ParseError(field, value, "empty")

    if not isinstance(value, str):
        raise ParseError(field, repr(value), "not a string")

    if not DECIMAL_PATTERN.fullmatch(value):
        logger.debug(f"Rejected {field}={value!r}")
        raise ParseError(field, value)

    try:
        return Decimal(value)
    except InvalidOperation:
        raise ParseError(field, value)
