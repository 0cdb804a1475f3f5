#!/usr/bin/env python3
"""
Tests for strict decimal parsing of line item fields.
"""

import unittest
from decimal import Decimal

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from invoice_generator.decimal_parser import parse
from invoice_generator.exceptions import ParseError


class TestParse(unittest.TestCase):
    """Test cases for parse()."""

    def test_valid_numerals(self):
        """Plain decimal numerals parse to their exact value."""
        test_cases = [
            ("10.00", Decimal("10.00")),
            ("3", Decimal("3")),
            ("-3.5", Decimal("-3.5")),
            ("+2", Decimal("2")),
            ("0", Decimal("0")),
            (".5", Decimal("0.5")),
            ("5.", Decimal("5")),
            ("0.000000001", Decimal("0.000000001")),
        ]

        for value, expected in test_cases:
            with self.subTest(value=value):
                self.assertEqual(parse(value), expected)

    def test_full_precision_is_kept(self):
        """No rounding happens at parse time."""
        test_cases = [
            "10.00",
            "-0.001",
            "123456789012345678901234567890.123",
            "19.999999999999999999",
        ]

        for value in test_cases:
            with self.subTest(value=value):
                self.assertEqual(str(parse(value)), value)

    def test_trailing_zeros_preserved(self):
        self.assertEqual(parse("10.00").as_tuple().exponent, -2)

    def test_invalid_numerals(self):
        """Anything that is not a plain decimal numeral is rejected."""
        test_cases = [
            "",
            "abc",
            "1.2.3",
            "1e5",
            "NaN",
            "Infinity",
            " 1",
            "1 ",
            "1\n",
            "1,000",
            "$5",
            "5€",
            "1_000",
            "-",
            ".",
            "١٢",
        ]

        for value in test_cases:
            with self.subTest(value=value):
                with self.assertRaises(ParseError):
                    parse(value)

    def test_none_and_non_strings(self):
        with self.assertRaises(ParseError):
            parse(None)
        with self.assertRaises(ParseError):
            parse(5)

    def test_error_reports_field_and_value(self):
        with self.assertRaises(ParseError) as ctx:
            parse("abc", "quantity")

        self.assertEqual(ctx.exception.field, "quantity")
        self.assertEqual(ctx.exception.value, "abc")
        self.assertIn("quantity", str(ctx.exception))

    def test_parse_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse("x")


if __name__ == '__main__':
    unittest.main()
