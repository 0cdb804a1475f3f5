#!/usr/bin/env python3
"""
Document assembly: title, item table and totals block.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from .calculator import DocumentTotals, summarize
from .exceptions import DocumentError, ParseError
from .layout import Cell, Cursor, PlacedRow, RowLayout
from .models import PreparedLineItem, RawLineItem, prepare
from .options import Options
from .pdf_writer import PdfCanvas, register_fonts

logger = logging.getLogger(__name__)

DOCUMENT_TYPES = ('invoice', 'quotation')
TITLE_HEIGHT = 12.0
TOTALS_GAP = 4.0


@dataclass
class Document:
    """An invoice or quotation made of raw line items."""
    items: Sequence[RawLineItem]
    options: Optional[Options] = None
    doc_type: str = 'invoice'
    ref: str = ''

    def __post_init__(self):
        if self.options is None:
            self.options = Options()
        if self.doc_type not in DOCUMENT_TYPES:
            raise DocumentError(f"unknown document type {self.doc_type!r}, expected one of {DOCUMENT_TYPES}")

    def with_options(self, **overrides) -> 'Document':
        return replace(self, options=self.options.with_overrides(**overrides))

    def prepare(self) -> List[PreparedLineItem]:
        """
        Prepare every line item, stopping at the first one that fails.

        A document with a bad line must not be produced at all, so the error
        is raised to the caller instead of skipping the item.
        """
        prepared = []
        for index, raw in enumerate(self.items):
            try:
                prepared.append(prepare(raw))
            except ParseError as e:
                logger.error(f"Line item {index + 1} ({raw.name!r}) is invalid: {e}")
                raise
        return prepared

    def totals(self) -> DocumentTotals:
        return summarize(self.prepare())

    @property
    def title(self) -> str:
        opts = self.options
        label = opts.text_type_invoice if self.doc_type == 'invoice' else opts.text_type_quotation
        return f"{label} {opts.text_ref_title} {self.ref}".strip() if self.ref else label

    def _title_row(self, layout: RowLayout, cursor: Cursor) -> Tuple[PlacedRow, Cursor]:
        cols = self.options.columns
        cell = Cell(
            cols.name, cursor.y, cols.right - cols.name, TITLE_HEIGHT,
            layout.encoder.encode(self.title), self.options.title_style, align='L',
        )
        return PlacedRow(cursor.y, TITLE_HEIGHT, (cell,)), cursor.advance(TITLE_HEIGHT)

    def _totals_rows(self, layout: RowLayout, totals: DocumentTotals, cursor: Cursor) -> Tuple[List[PlacedRow], Cursor]:
        opts = self.options
        cols = opts.columns
        fmt = layout.formatter.format
        enc = layout.encoder.encode
        height = opts.header_row_height

        lines = [(opts.text_total_total, totals.subtotal, opts.base_style, None)]
        if totals.discount:
            lines.append((opts.text_total_discounted, totals.discount.copy_negate(), opts.base_style, None))
        lines.append((opts.text_total_tax, totals.tax, opts.base_style, None))
        lines.append((opts.text_total_with_tax, totals.grand_total, opts.bold_style, opts.grey_bg_color))

        rows = []
        for label, amount, style, fill in lines:
            placements = (
                Cell(cols.quantity, cursor.y, cols.total - cols.quantity, height, enc(label), style, fill=fill),
                Cell(cols.total, cursor.y, cols.total_width, height, enc(fmt(amount)), style, fill=fill),
            )
            rows.append(PlacedRow(cursor.y, height, placements))
            cursor = cursor.advance(height)
        return rows, cursor

    def build(self, path: Union[str, Path]) -> Path:
        """
        Render the document to a PDF file.

        Args:
            path: Destination file

        Returns:
            Path of the written PDF

        Raises:
            ParseError: If any line item cannot be prepared
        """
        opts = self.options
        prepared = self.prepare()
        totals = summarize(prepared)

        register_fonts(opts)
        layout = RowLayout(opts)
        # Row heights do not depend on each other, only the cursor pass does
        measures = [layout.measure(item) for item in prepared]

        pdf = PdfCanvas(str(path), opts)
        bottom = opts.page_height - opts.margin_bottom

        title, cursor = self._title_row(layout, Cursor(opts.margin_top))
        header, cursor = layout.header(cursor)
        pdf.draw_rows([title, header])

        rows_on_page = 0
        for measure in measures:
            if rows_on_page:
                cursor = cursor.advance(opts.row_spacing)
            if rows_on_page and cursor.y + measure.height > bottom:
                pdf.new_page()
                header, cursor = layout.header(Cursor(opts.margin_top))
                pdf.draw_rows([header])
                rows_on_page = 0
            row, cursor = layout.place(measure, cursor)
            pdf.draw_rows([row])
            rows_on_page += 1

        cursor = cursor.advance(TOTALS_GAP)
        totals_height = 4 * opts.header_row_height
        if cursor.y + totals_height > bottom:
            pdf.new_page()
            cursor = Cursor(opts.margin_top)
        totals_rows, cursor = self._totals_rows(layout, totals, cursor)
        pdf.draw_rows(totals_rows)

        pdf.save()
        logger.info(f"Rendered {self.doc_type} with {len(prepared)} items, total {totals.grand_total}")
        return Path(path)
