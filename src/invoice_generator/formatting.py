#!/usr/bin/env python3
"""
Money formatting for rendered documents.
"""

from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP

CURRENCY_SYMBOLS = {
    'USD': '$',
    'EUR': '€',
    'GBP': '£',
    'JPY': '¥',
    'CAD': 'C$',
    'AUD': 'A$',
    'CHF': 'CHF',
    'SEK': 'kr',
    'NOK': 'kr',
    'DKK': 'kr',
}


def currency_symbol(currency_code: str) -> str:
    """Get currency symbol from currency code."""
    return CURRENCY_SYMBOLS.get(currency_code.upper(), currency_code)


@dataclass(frozen=True)
class MoneyFormatter:
    """Turns exact decimal amounts into display strings."""
    symbol: str = '€'
    precision: int = 2
    decimal_separator: str = '.'
    thousands_separator: str = ','
    symbol_first: bool = True

    def quantize(self, amount: Decimal) -> Decimal:
        # Room for every integer digit, so large amounts never hit the context limit
        context = Context(prec=max(28, amount.adjusted() + self.precision + 2), rounding=ROUND_HALF_UP)
        return amount.quantize(Decimal(1).scaleb(-self.precision), context=context)

    def format_number(self, amount: Decimal) -> str:
        """Format without currency symbol, e.g. ``1,234.50``."""
        rounded = self.quantize(amount)
        # Placeholders so the two separators can be swapped safely
        formatted = f"{rounded.copy_abs():,.{self.precision}f}"
        formatted = formatted.replace(',', '\0').replace('.', '\1')
        formatted = formatted.replace('\0', self.thousands_separator).replace('\1', self.decimal_separator)
        return f"-{formatted}" if rounded < 0 else formatted

    def format(self, amount: Decimal) -> str:
        number = self.format_number(amount)
        sign = ''
        if number.startswith('-'):
            sign, number = '-', number[1:]

        if self.symbol_first:
            return f"{sign}{self.symbol}{number}"
        return f"{sign}{number} {self.symbol}"
