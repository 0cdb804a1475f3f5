"""
Data models for the Invoice Generator.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .adjustments import Discount, RawAdjustment, Tax
from .decimal_parser import parse
from .exceptions import DocumentError, ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawLineItem:
    """A billable entry exactly as supplied by the caller."""
    name: str
    unit_cost: str
    quantity: str
    description: str = ""
    discount: Optional[RawAdjustment] = None
    tax: Optional[RawAdjustment] = None


@dataclass(frozen=True)
class PreparedLineItem:
    """A line item whose numeric fields have been validated."""
    name: str
    description: str
    unit_cost: Decimal
    quantity: Decimal
    discount: Optional[Discount] = None
    tax: Optional[Tax] = None
    # Source strings, kept for display
    unit_cost_text: str = ""
    quantity_text: str = ""


def prepare(raw: RawLineItem) -> PreparedLineItem:
    """
    Validate a raw line item and convert its numeric fields to decimals.

    Fields are checked in order (unit cost, quantity, discount, tax) and the
    first failure is raised as is.

    Raises:
        DocumentError: If the item has no name
        ParseError: If any numeric field is not a valid decimal
    """
    if not raw.name:
        raise DocumentError("line item name is required")

    try:
        unit_cost = parse(raw.unit_cost, "unit_cost")
        quantity = parse(raw.quantity, "quantity")
        discount = Discount.prepare(raw.discount)
        tax = Tax.prepare(raw.tax)
    except ParseError as e:
        logger.error(f"Cannot prepare line item {raw.name!r}: {e}")
        raise

    return PreparedLineItem(
        name=raw.name,
        description=raw.description or "",
        unit_cost=unit_cost,
        quantity=quantity,
        discount=discount,
        tax=tax,
        unit_cost_text=raw.unit_cost,
        quantity_text=raw.quantity,
    )
