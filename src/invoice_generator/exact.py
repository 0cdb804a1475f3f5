#!/usr/bin/env python3
"""
Exact decimal arithmetic for the line-item pipeline.

Every operation runs in its own decimal context, sized from the operands so
the true result always fits. The caller's active context (precision,
rounding, traps) is never used. ``Inexact`` and ``Rounded`` are trapped, so
a result that would need rounding raises instead of being silently altered.
"""

from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    Rounded,
)
from functools import reduce
from typing import Iterable

MIN_PRECISION = 28


def _context(precision: int) -> Context:
    return Context(
        prec=max(MIN_PRECISION, precision),
        rounding=ROUND_HALF_EVEN,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow, Inexact, Rounded],
    )


def _digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def multiply(a: Decimal, b: Decimal) -> Decimal:
    # A product never has more coefficient digits than both factors together
    return _context(_digits(a) + _digits(b)).multiply(a, b)


def add(a: Decimal, b: Decimal) -> Decimal:
    # Span from the highest digit to the lowest exponent, plus one for a carry
    high = max(a.adjusted(), b.adjusted())
    low = min(a.as_tuple().exponent, b.as_tuple().exponent)
    return _context(high - low + 2).add(a, b)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    return add(a, b.copy_negate())


def percent_of(base: Decimal, rate: Decimal) -> Decimal:
    """``base * rate / 100``, without rounding."""
    product = multiply(base, rate)
    return _context(_digits(product)).scaleb(product, -2)


def total(values: Iterable[Decimal]) -> Decimal:
    return reduce(add, values, Decimal('0'))
