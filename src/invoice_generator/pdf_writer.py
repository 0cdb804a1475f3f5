#!/usr/bin/env python3
"""
PDF drawing on top of the ReportLab canvas.
"""

import logging
from typing import Iterable

from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen.canvas import Canvas

from .layout import Cell, Placement, PlacedRow, TextBlock
from .options import Options, TextStyle

logger = logging.getLogger(__name__)

# Approximate cap height as a fraction of the font size (Helvetica)
CAP_HEIGHT_RATIO = 0.70
# Horizontal padding inside cells, in mm
CELL_PADDING = 1.0


def register_fonts(options: Options) -> None:
    """Register embedded TrueType fonts named in the options, if any."""
    for name, path in ((options.font, options.font_path), (options.bold_font, options.bold_font_path)):
        if path:
            pdfmetrics.registerFont(TTFont(name, path))
            logger.debug(f"Registered font {name} from {path}")


class PdfCanvas:
    """
    Draws layout placements onto a PDF file.

    Placements use top-down millimetre coordinates; ReportLab uses
    bottom-up points, so every position is converted here.
    """

    def __init__(self, path: str, options: Options):
        self.path = str(path)
        self.options = options
        self.page_count = 1
        self.canvas = Canvas(self.path, pagesize=(options.page_width * mm, options.page_height * mm))

    def _y(self, y: float) -> float:
        return (self.options.page_height - y) * mm

    def _apply_style(self, style: TextStyle) -> None:
        r, g, b = style.color
        self.canvas.setFont(style.font, style.size)
        self.canvas.setFillColorRGB(r / 255, g / 255, b / 255)

    def _baseline(self, top: float, height: float, style: TextStyle) -> float:
        cap_height = style.size * CAP_HEIGHT_RATIO / mm
        return top + (height + cap_height) / 2

    def _draw_string(self, x: float, width: float, baseline: float, text: str, align: str) -> None:
        y = self._y(baseline)
        if align == 'R':
            self.canvas.drawRightString((x + width - CELL_PADDING) * mm, y, text)
        elif align == 'C':
            self.canvas.drawCentredString((x + width / 2) * mm, y, text)
        else:
            self.canvas.drawString((x + CELL_PADDING) * mm, y, text)

    def draw_text_block(self, block: TextBlock) -> None:
        self.canvas.saveState()
        self._apply_style(block.style)
        for index, line in enumerate(block.lines):
            top = block.y + index * block.line_height
            baseline = self._baseline(top, block.line_height, block.style)
            self._draw_string(block.x, block.width, baseline, line, 'L')
        self.canvas.restoreState()

    def draw_cell(self, cell: Cell) -> None:
        self.canvas.saveState()
        rect = (cell.x * mm, self._y(cell.y + cell.height), cell.width * mm, cell.height * mm)
        if cell.fill is not None:
            r, g, b = cell.fill
            self.canvas.setFillColorRGB(r / 255, g / 255, b / 255)
            self.canvas.rect(*rect, stroke=0, fill=1)
        if cell.border:
            self.canvas.rect(*rect, stroke=1, fill=0)
        if cell.text:
            self._apply_style(cell.style)
            self._draw_string(cell.x, cell.width, self._baseline(cell.y, cell.height, cell.style), cell.text, cell.align)
        self.canvas.restoreState()

    def draw(self, placement: Placement) -> None:
        if isinstance(placement, TextBlock):
            self.draw_text_block(placement)
        elif isinstance(placement, Cell):
            self.draw_cell(placement)
        else:
            raise TypeError(f"cannot draw {type(placement).__name__}")

    def draw_rows(self, rows: Iterable[PlacedRow]) -> None:
        for row in rows:
            for placement in row.placements:
                self.draw(placement)

    def new_page(self) -> None:
        self.canvas.showPage()
        self.page_count += 1

    def save(self) -> None:
        self.canvas.save()
        logger.info(f"Wrote {self.page_count} page(s) to {self.path}")
