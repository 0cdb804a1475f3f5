#!/usr/bin/env python3
"""
Discounts and taxes.

Both are percentage-or-amount adjustments resolved against a base value.
They differ only in where they sit in the line-item pipeline: a discount is
subtracted from the subtotal, a tax is added on top of the discounted
subtotal.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Optional

from .decimal_parser import parse
from .exact import percent_of

ZERO = Decimal('0')


class AdjustmentKind(Enum):
    AMOUNT = "amount"
    PERCENT = "percent"


class Stage(Enum):
    """Insertion point of an adjustment in the line-item pipeline."""
    SUBTRACT_FROM_SUBTOTAL = "subtract_from_subtotal"
    ADD_AFTER_DISCOUNT = "add_after_discount"


@dataclass(frozen=True)
class RawAdjustment:
    """An adjustment as supplied by the caller, magnitude still a string."""
    kind: AdjustmentKind
    magnitude: str


@dataclass(frozen=True)
class Adjustment:
    """A validated adjustment with an exact decimal magnitude."""
    kind: AdjustmentKind
    magnitude: Decimal

    stage: ClassVar[Stage]
    label: ClassVar[str] = "adjustment"

    @classmethod
    def prepare(cls, raw: Optional[RawAdjustment]):
        """Parse a raw adjustment; ``None`` stays ``None``."""
        if raw is None:
            return None
        magnitude = parse(raw.magnitude, f"{cls.label}.{raw.kind.value}")
        return cls(kind=raw.kind, magnitude=magnitude)

    def resolve(self, base: Decimal) -> Decimal:
        """Concrete amount of this adjustment for the given base."""
        if not self.is_percent:
            return self.magnitude
        return percent_of(base, self.magnitude)

    @property
    def is_percent(self) -> bool:
        return self.kind is AdjustmentKind.PERCENT


class Discount(Adjustment):
    stage = Stage.SUBTRACT_FROM_SUBTOTAL
    label = "discount"


class Tax(Adjustment):
    stage = Stage.ADD_AFTER_DISCOUNT
    label = "tax"


def _resolve(adjustment: Optional[Adjustment], base: Decimal, stage: Stage) -> Decimal:
    if adjustment is None:
        return ZERO
    if adjustment.stage is not stage:
        raise TypeError(
            f"{type(adjustment).__name__} cannot be resolved at stage {stage.value}"
        )
    return adjustment.resolve(base)


def resolve_discount(discount: Optional[Discount], base: Decimal) -> Decimal:
    """Amount to subtract from ``base`` (the pre-discount subtotal)."""
    return _resolve(discount, base, Stage.SUBTRACT_FROM_SUBTOTAL)


def resolve_tax(tax: Optional[Tax], base: Decimal) -> Decimal:
    """Amount to add to ``base``, which must be the discounted subtotal."""
    return _resolve(tax, base, Stage.ADD_AFTER_DISCOUNT)
