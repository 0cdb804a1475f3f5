#!/usr/bin/env python3
"""
Invoice Generator CLI
Renders invoice/quotation JSON documents to PDF and prints line totals.
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .calculator import compute_totals
from .exceptions import InvoiceError
from .loader import load_document

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

console = Console()


def _load(document: str, currency: Optional[str], precision: Optional[int]):
    doc = load_document(document)
    return doc.with_options(currency=currency, currency_precision=precision)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def cli(verbose: bool):
    """Generate invoices and quotations from JSON line items."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command()
@click.argument('document', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Output PDF path (default: next to the input)')
@click.option('--currency', help='Currency code, e.g. USD or EUR')
@click.option('--precision', type=int, help='Number of decimals shown for amounts')
def render(document: str, output: Optional[str], currency: Optional[str], precision: Optional[int]):
    """Render DOCUMENT to a PDF file."""
    output = output or str(Path(document).with_suffix('.pdf'))

    try:
        doc = _load(document, currency, precision)
        path = doc.build(output)
    except InvoiceError as e:
        click.echo(f"Error generating document: {e}", err=True)
        raise click.Abort()

    click.echo(f"Document written to: {path}")


@cli.command()
@click.argument('document', type=click.Path(exists=True, dir_okay=False))
@click.option('--currency', help='Currency code, e.g. USD or EUR')
@click.option('--precision', type=int, help='Number of decimals shown for amounts')
def totals(document: str, currency: Optional[str], precision: Optional[int]):
    """Print the computed totals of every line item in DOCUMENT."""
    try:
        doc = _load(document, currency, precision)
        items = doc.prepare()
        summary = doc.totals()
    except InvoiceError as e:
        click.echo(f"Error computing totals: {e}", err=True)
        raise click.Abort()

    fmt = doc.options.money_formatter().format

    table = Table(title=doc.title)
    table.add_column("Item")
    table.add_column("Subtotal", justify="right")
    table.add_column("Discount", justify="right")
    table.add_column("Tax", justify="right")
    table.add_column("Total", justify="right")

    for item in items:
        line = compute_totals(item)
        table.add_row(item.name, fmt(line.subtotal), fmt(line.discount), fmt(line.tax), fmt(line.grand_total))

    table.add_section()
    table.add_row("TOTAL", fmt(summary.subtotal), fmt(summary.discount), fmt(summary.tax), fmt(summary.grand_total))

    console.print(table)


if __name__ == '__main__':
    cli()
