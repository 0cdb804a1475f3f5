"""
Invoice Generator

Computes exact line-item totals (discount before tax) and lays them out as
PDF invoices and quotations.
"""

__version__ = "1.0.0"

from .adjustments import AdjustmentKind, Discount, RawAdjustment, Tax, resolve_discount, resolve_tax
from .calculator import (
    DocumentTotals,
    LineTotals,
    compute_totals,
    discounted_subtotal,
    grand_total,
    subtotal,
    summarize,
    tax_amount,
)
from .decimal_parser import parse
from .document import Document
from .exceptions import DocumentError, InvoiceError, NotPreparedError, ParseError
from .layout import Cursor, RowLayout
from .loader import document_from_dict, load_document
from .models import PreparedLineItem, RawLineItem, prepare
from .options import ColumnLayout, Options

__all__ = [
    "AdjustmentKind",
    "ColumnLayout",
    "Cursor",
    "Discount",
    "Document",
    "DocumentError",
    "DocumentTotals",
    "InvoiceError",
    "LineTotals",
    "NotPreparedError",
    "Options",
    "ParseError",
    "PreparedLineItem",
    "RawAdjustment",
    "RawLineItem",
    "RowLayout",
    "Tax",
    "compute_totals",
    "discounted_subtotal",
    "document_from_dict",
    "grand_total",
    "load_document",
    "parse",
    "prepare",
    "resolve_discount",
    "resolve_tax",
    "subtotal",
    "summarize",
    "tax_amount",
]
