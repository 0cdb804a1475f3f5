#!/usr/bin/env python3
"""
Load invoice/quotation documents from JSON.

Expected shape::

    {
      "type": "invoice",
      "ref": "INV-042",
      "options": {"currency": "USD"},
      "items": [
        {"name": "Consulting", "description": "March", "unit_cost": "100",
         "quantity": "1", "discount": {"percent": "10"}, "tax": {"percent": "20"}}
      ]
    }
"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .adjustments import AdjustmentKind, RawAdjustment
from .document import Document
from .exceptions import DocumentError
from .models import RawLineItem
from .options import Options

logger = logging.getLogger(__name__)


def _text(value: Any, field: str) -> str:
    """Numeric fields may be given as JSON strings or numbers."""
    if value is None:
        return ""
    if isinstance(value, bool):
        raise DocumentError(f"{field} must be a string or a number")
    if isinstance(value, Decimal):
        # JSON floats in exponent form, e.g. 1.5e2, become plain numerals
        return format(value, 'f')
    if isinstance(value, (str, int)):
        return str(value)
    raise DocumentError(f"{field} must be a string or a number")


def _adjustment(data: Any, field: str) -> Optional[RawAdjustment]:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise DocumentError(f"{field} must be an object")

    present = [kind for kind in AdjustmentKind if data.get(kind.value) not in (None, "")]
    if len(present) != 1:
        raise DocumentError(f"{field} needs exactly one of 'percent' or 'amount'")

    kind = present[0]
    return RawAdjustment(kind=kind, magnitude=_text(data[kind.value], f"{field}.{kind.value}"))


def item_from_dict(data: Dict[str, Any], index: int = 0) -> RawLineItem:
    """Build a raw line item; numeric fields are validated later, by ``prepare``."""
    where = f"items[{index}]"
    if not isinstance(data, dict):
        raise DocumentError(f"{where} must be an object")

    name = data.get("name")
    if not name or not isinstance(name, str):
        raise DocumentError(f"{where}.name is required")

    return RawLineItem(
        name=name,
        description=data.get("description") or "",
        unit_cost=_text(data.get("unit_cost"), f"{where}.unit_cost"),
        quantity=_text(data.get("quantity"), f"{where}.quantity"),
        discount=_adjustment(data.get("discount"), f"{where}.discount"),
        tax=_adjustment(data.get("tax"), f"{where}.tax"),
    )


def _plain(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def document_from_dict(data: Dict[str, Any]) -> Document:
    """
    Build a Document from a parsed JSON mapping.

    Args:
        data: Mapping with ``items`` and optional ``type``, ``ref`` and ``options``

    Returns:
        Document holding raw (not yet prepared) line items
    """
    if not isinstance(data, dict):
        raise DocumentError("document must be a JSON object")

    items = data.get("items")
    if not isinstance(items, list) or not items:
        raise DocumentError("document must contain a non-empty 'items' list")

    raw_items: List[RawLineItem] = [item_from_dict(item, i) for i, item in enumerate(items)]

    doc_options = Options.from_dict(_plain(data.get("options")))

    logger.info(f"Loaded document with {len(raw_items)} line items")
    return Document(
        items=raw_items,
        options=doc_options,
        doc_type=data.get("type", "invoice"),
        ref=str(data.get("ref") or ""),
    )


def load_document(path: Union[str, Path]) -> Document:
    """Read a JSON document from disk."""
    path = Path(path)
    logger.info(f"Loading document from: {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise DocumentError(f"{path}: invalid JSON ({e})")

    return document_from_dict(data)
