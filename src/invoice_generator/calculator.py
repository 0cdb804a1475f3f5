#!/usr/bin/env python3
"""
Line Item Calculator
Computes subtotal, discount, tax and grand total for prepared line items.

All arithmetic is exact (see ``exact``) whatever the active decimal context;
nothing is rounded here. Rounding for display belongs to the money formatter.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

from .adjustments import ZERO, resolve_discount, resolve_tax
from .exact import add, multiply, subtract, total
from .exceptions import NotPreparedError
from .models import PreparedLineItem

logger = logging.getLogger(__name__)


def _require_prepared(item) -> PreparedLineItem:
    if not isinstance(item, PreparedLineItem):
        raise NotPreparedError(
            f"{type(item).__name__} must be prepared before computing totals"
        )
    return item


def subtotal(item: PreparedLineItem) -> Decimal:
    """Unit cost times quantity, before any adjustment."""
    item = _require_prepared(item)
    return multiply(item.unit_cost, item.quantity)


def discount_amount(item: PreparedLineItem) -> Decimal:
    item = _require_prepared(item)
    return resolve_discount(item.discount, subtotal(item))


def discounted_subtotal(item: PreparedLineItem) -> Decimal:
    """Subtotal minus the resolved discount."""
    return subtract(subtotal(item), discount_amount(item))


def tax_amount(item: PreparedLineItem) -> Decimal:
    """Tax resolved against the discounted subtotal, never the raw subtotal."""
    item = _require_prepared(item)
    return resolve_tax(item.tax, discounted_subtotal(item))


def grand_total(item: PreparedLineItem) -> Decimal:
    return add(discounted_subtotal(item), tax_amount(item))


@dataclass(frozen=True)
class LineTotals:
    subtotal: Decimal
    discount: Decimal
    discounted_subtotal: Decimal
    tax: Decimal
    grand_total: Decimal


def compute_totals(item: PreparedLineItem) -> LineTotals:
    """Compute every derived value of one item in pipeline order."""
    item = _require_prepared(item)

    base = subtotal(item)
    discount = resolve_discount(item.discount, base)
    discounted = subtract(base, discount)
    tax = resolve_tax(item.tax, discounted)

    return LineTotals(
        subtotal=base,
        discount=discount,
        discounted_subtotal=discounted,
        tax=tax,
        grand_total=add(discounted, tax),
    )


@dataclass(frozen=True)
class DocumentTotals:
    """Sums over every line item of a document."""
    subtotal: Decimal = ZERO
    discount: Decimal = ZERO
    discounted_subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    grand_total: Decimal = ZERO


def summarize(items: Iterable[PreparedLineItem]) -> DocumentTotals:
    """
    Add up the totals of several line items.

    Args:
        items: Prepared line items

    Returns:
        DocumentTotals with one sum per derived value
    """
    lines: List[LineTotals] = [compute_totals(item) for item in items]

    totals = DocumentTotals(
        subtotal=total(line.subtotal for line in lines),
        discount=total(line.discount for line in lines),
        discounted_subtotal=total(line.discounted_subtotal for line in lines),
        tax=total(line.tax for line in lines),
        grand_total=total(line.grand_total for line in lines),
    )

    logger.debug(
        f"Summarized {len(lines)} items: subtotal={totals.subtotal}, "
        f"tax={totals.tax}, total={totals.grand_total}"
    )
    return totals
