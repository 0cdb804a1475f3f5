#!/usr/bin/env python3
"""
Rendering options for generated documents.

Lengths are millimetres measured from the top-left corner of the page,
font sizes are points and colours are 0-255 RGB triples.
"""

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Optional, Tuple

from .encoding import PassthroughEncoder, TextEncoder
from .exceptions import DocumentError
from .formatting import MoneyFormatter, currency_symbol

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class TextStyle:
    font: str
    size: float
    color: Color = (0, 0, 0)


@dataclass(frozen=True)
class ColumnLayout:
    """Left edges of the item table columns, plus the right edge of the table."""
    name: float = 10.0
    unit_price: float = 95.0
    quantity: float = 125.0
    tax: float = 145.0
    total: float = 170.0
    right: float = 200.0

    def __post_init__(self):
        edges = [self.name, self.unit_price, self.quantity, self.tax, self.total, self.right]
        if any(b <= a for a, b in zip(edges, edges[1:])):
            raise DocumentError(f"column edges must be strictly increasing, got {edges}")

    @property
    def name_width(self) -> float:
        return self.unit_price - self.name

    @property
    def unit_price_width(self) -> float:
        return self.quantity - self.unit_price

    @property
    def quantity_width(self) -> float:
        return self.tax - self.quantity

    @property
    def tax_width(self) -> float:
        return self.total - self.tax

    @property
    def total_width(self) -> float:
        return self.right - self.total


@dataclass(frozen=True)
class Options:
    # Page
    page_width: float = 210.0
    page_height: float = 297.0
    margin_top: float = 15.0
    margin_bottom: float = 15.0

    # Typography
    font: str = 'Helvetica'
    bold_font: str = 'Helvetica-Bold'
    font_path: Optional[str] = None
    bold_font_path: Optional[str] = None
    base_font_size: float = 8
    small_font_size: float = 7
    title_font_size: float = 16
    base_text_color: Color = (35, 35, 35)
    grey_text_color: Color = (82, 82, 82)
    grey_bg_color: Color = (232, 232, 232)

    # Item table
    line_height: float = 3.0
    description_gap: float = 1.0
    header_row_height: float = 6.0
    row_spacing: float = 0.0
    columns: ColumnLayout = field(default_factory=ColumnLayout)

    # Money
    currency: str = 'EUR'
    currency_symbol: Optional[str] = None
    currency_precision: int = 2
    currency_decimal: str = '.'
    currency_thousand: str = ','
    currency_symbol_first: bool = True

    # Labels
    text_type_invoice: str = 'INVOICE'
    text_type_quotation: str = 'QUOTATION'
    text_ref_title: str = 'Ref.'
    text_items_name_title: str = 'Name'
    text_items_unit_cost_title: str = 'Unit price'
    text_items_quantity_title: str = 'Quantity'
    text_items_tax_title: str = 'Tax'
    text_items_total_title: str = 'Total'
    text_total_total: str = 'TOTAL'
    text_total_discounted: str = 'TOTAL DISCOUNT'
    text_total_tax: str = 'TAX'
    text_total_with_tax: str = 'TOTAL DUE'

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Options':
        """
        Build options from a plain mapping, e.g. the ``options`` block of a
        JSON document. Missing keys keep their defaults.

        Raises:
            DocumentError: On unknown keys or malformed values
        """
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise DocumentError(f"options must be an object, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise DocumentError(f"unknown option(s): {', '.join(unknown)}")

        values = dict(data)
        if 'columns' in values:
            columns = values['columns']
            if not isinstance(columns, dict):
                raise DocumentError("options.columns must be an object")
            try:
                values['columns'] = replace(ColumnLayout(), **columns)
            except TypeError as e:
                raise DocumentError(f"options.columns: {e}")

        for key in ('base_text_color', 'grey_text_color', 'grey_bg_color'):
            if key in values:
                color = values[key]
                if not isinstance(color, (list, tuple)) or len(color) != 3:
                    raise DocumentError(f"options.{key} must be an RGB triple")
                values[key] = tuple(int(c) for c in color)

        logger.debug(f"Loaded options: {sorted(values)}")
        return cls(**values)

    def with_overrides(self, **overrides) -> 'Options':
        """Copy with the non-None keyword arguments applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @property
    def base_style(self) -> TextStyle:
        return TextStyle(self.font, self.base_font_size, self.base_text_color)

    @property
    def small_style(self) -> TextStyle:
        return TextStyle(self.font, self.small_font_size, self.grey_text_color)

    @property
    def bold_style(self) -> TextStyle:
        return TextStyle(self.bold_font, self.base_font_size, self.base_text_color)

    @property
    def title_style(self) -> TextStyle:
        return TextStyle(self.bold_font, self.title_font_size, self.base_text_color)

    def money_formatter(self) -> MoneyFormatter:
        return MoneyFormatter(
            symbol=self.currency_symbol or currency_symbol(self.currency),
            precision=self.currency_precision,
            decimal_separator=self.currency_decimal,
            thousands_separator=self.currency_thousand,
            symbol_first=self.currency_symbol_first,
        )

    def text_encoder(self):
        # Embedded TrueType fonts carry their own glyphs
        if self.font_path:
            return PassthroughEncoder()
        return TextEncoder()
