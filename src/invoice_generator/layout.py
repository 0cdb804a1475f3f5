#!/usr/bin/env python3
"""
Item table layout.

Turns prepared line items into positioned text blocks and cells. Row heights
are measured independently for every item; a single ordered pass then
advances the vertical cursor and positions each row under the previous one.

Coordinates are millimetres from the top-left corner of the page, with y
growing downwards.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit

from .calculator import compute_totals
from .exceptions import NotPreparedError
from .formatting import MoneyFormatter
from .models import PreparedLineItem
from .options import Color, Options, TextStyle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cursor:
    """Vertical position on the current page."""
    y: float

    def advance(self, height: float) -> 'Cursor':
        return Cursor(self.y + height)


@dataclass(frozen=True)
class TextBlock:
    """Left-aligned, already wrapped text; one entry per line."""
    x: float
    y: float
    width: float
    line_height: float
    lines: Tuple[str, ...]
    style: TextStyle

    @property
    def height(self) -> float:
        return len(self.lines) * self.line_height


@dataclass(frozen=True)
class Cell:
    """Single line of text boxed in a fixed band, vertically centred."""
    x: float
    y: float
    width: float
    height: float
    text: str
    style: TextStyle
    align: str = 'R'
    border: bool = False
    fill: Optional[Color] = None


Placement = Union[TextBlock, Cell]


@dataclass(frozen=True)
class RowMeasure:
    item: PreparedLineItem
    name_lines: Tuple[str, ...]
    description_lines: Tuple[str, ...]
    block_height: float
    height: float


@dataclass(frozen=True)
class PlacedRow:
    top: float
    height: float
    placements: Tuple[Placement, ...]

    @property
    def bottom(self) -> float:
        return self.top + self.height


class ReportLabMeasurer:
    """Wraps text with the font metrics ReportLab will draw with."""

    def wrap(self, text: str, width: float, style: TextStyle) -> List[str]:
        return simpleSplit(text, style.font, style.size, width * mm)


class RowLayout:
    """Lays out item rows in the fixed columns described by ``Options.columns``."""

    def __init__(self, options: Options, formatter: Optional[MoneyFormatter] = None,
                 encoder=None, measurer=None):
        self.options = options
        self.columns = options.columns
        self.formatter = formatter or options.money_formatter()
        self.encoder = encoder or options.text_encoder()
        self.measurer = measurer or ReportLabMeasurer()

    def measure(self, item: PreparedLineItem) -> RowMeasure:
        """Compute the wrapped lines and height of one row. Has no side effects."""
        if not isinstance(item, PreparedLineItem):
            raise NotPreparedError("only prepared line items can be laid out")

        opts = self.options
        width = self.columns.name_width

        name_lines = tuple(self.measurer.wrap(self.encoder.encode(item.name), width, opts.base_style)) or ('',)
        block_height = len(name_lines) * opts.line_height

        description_lines: Tuple[str, ...] = ()
        if item.description:
            description_lines = tuple(
                self.measurer.wrap(self.encoder.encode(item.description), width, opts.small_style)
            )
            if description_lines:
                block_height += opts.description_gap + len(description_lines) * opts.line_height

        return RowMeasure(
            item=item,
            name_lines=name_lines,
            description_lines=description_lines,
            block_height=block_height,
            height=max(block_height, opts.line_height),
        )

    def place(self, measure: RowMeasure, cursor: Cursor) -> Tuple[PlacedRow, Cursor]:
        """Position a measured row at ``cursor`` and return the cursor below it."""
        opts = self.options
        cols = self.columns
        item = measure.item
        top = cursor.y
        height = measure.height

        placements: List[Placement] = [
            TextBlock(cols.name, top, cols.name_width, opts.line_height, measure.name_lines, opts.base_style),
        ]
        if measure.description_lines:
            name_height = len(measure.name_lines) * opts.line_height
            placements.append(TextBlock(
                cols.name,
                top + name_height + opts.description_gap,
                cols.name_width,
                opts.line_height,
                measure.description_lines,
                opts.small_style,
            ))

        # Money is formatted here, at render time; computations stay exact
        totals = compute_totals(item)
        tax_text = self.formatter.format(totals.tax) if item.tax is not None else ''
        style = opts.base_style
        enc = self.encoder.encode
        placements.extend([
            Cell(cols.unit_price, top, cols.unit_price_width, height, enc(self.formatter.format(item.unit_cost)), style),
            Cell(cols.quantity, top, cols.quantity_width, height, enc(str(item.quantity)), style),
            Cell(cols.tax, top, cols.tax_width, height, enc(tax_text), style),
            Cell(cols.total, top, cols.total_width, height, enc(self.formatter.format(totals.grand_total)), style),
        ])

        return PlacedRow(top, height, tuple(placements)), cursor.advance(height)

    def layout(self, items: Iterable[PreparedLineItem], cursor: Cursor,
               spacing: float = 0.0) -> Tuple[List[PlacedRow], Cursor]:
        """
        Lay out several rows on one continuous band, in document order.

        Args:
            items: Prepared line items
            cursor: Position of the first row
            spacing: Extra gap inserted between consecutive rows

        Returns:
            The placed rows and the cursor below the last one
        """
        measures = [self.measure(item) for item in items]
        return self.place_all(measures, cursor, spacing)

    def place_all(self, measures: Sequence[RowMeasure], cursor: Cursor,
                  spacing: float = 0.0) -> Tuple[List[PlacedRow], Cursor]:
        rows: List[PlacedRow] = []
        for index, measure in enumerate(measures):
            if index and spacing:
                cursor = cursor.advance(spacing)
            row, cursor = self.place(measure, cursor)
            rows.append(row)
        logger.debug(f"Placed {len(rows)} rows, cursor now at {cursor.y:.2f}mm")
        return rows, cursor

    def header(self, cursor: Cursor) -> Tuple[PlacedRow, Cursor]:
        """Grey title row above the item table."""
        opts = self.options
        cols = self.columns
        height = opts.header_row_height
        style = opts.bold_style
        enc = self.encoder.encode
        fill = opts.grey_bg_color

        titles = [
            (cols.name, cols.name_width, opts.text_items_name_title, 'L'),
            (cols.unit_price, cols.unit_price_width, opts.text_items_unit_cost_title, 'R'),
            (cols.quantity, cols.quantity_width, opts.text_items_quantity_title, 'R'),
            (cols.tax, cols.tax_width, opts.text_items_tax_title, 'R'),
            (cols.total, cols.total_width, opts.text_items_total_title, 'R'),
        ]
        placements = tuple(
            Cell(x, cursor.y, width, height, enc(title), style, align=align, fill=fill)
            for x, width, title, align in titles
        )
        return PlacedRow(cursor.y, height, placements), cursor.advance(height)
