#!/usr/bin/env python3
"""
Example usage of the Invoice Generator
Builds a quotation in code and renders it next to this script.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from invoice_generator import (
    AdjustmentKind,
    Document,
    Options,
    RawAdjustment,
    RawLineItem,
    compute_totals,
    prepare,
)


def build_items():
    return [
        RawLineItem(
            name="CNC machined bracket",
            description="6061-T6 aluminium, anodised black",
            unit_cost="240.92",
            quantity="6",
            discount=RawAdjustment(AdjustmentKind.PERCENT, "15"),
            tax=RawAdjustment(AdjustmentKind.PERCENT, "8.25"),
        ),
        RawLineItem(
            name="Tooling setup",
            unit_cost="2000.00",
            quantity="1",
        ),
    ]


def main():
    items = build_items()

    print("Line totals:")
    for raw in items:
        totals = compute_totals(prepare(raw))
        print(f"  {raw.name}: subtotal={totals.subtotal} discounted={totals.discounted_subtotal} "
              f"tax={totals.tax} total={totals.grand_total}")

    options = Options(currency='USD')
    document = Document(items=items, options=options, doc_type='quotation', ref='Q-2025-001')
    output = Path(__file__).parent / "quotation.pdf"
    document.build(output)
    print(f"Written to {output}")


if __name__ == "__main__":
    main()
