#!/usr/bin/env python3
"""
Tests for loading JSON documents.
"""

import json
import os
import tempfile
import unittest
from decimal import Decimal

from invoice_generator.adjustments import AdjustmentKind, RawAdjustment
from invoice_generator.calculator import subtotal
from invoice_generator.exceptions import DocumentError
from invoice_generator.loader import document_from_dict, item_from_dict, load_document
from invoice_generator.models import prepare


SAMPLE = {
    "type": "quotation",
    "ref": "Q-7",
    "options": {"currency": "USD", "margin_top": 12.5},
    "items": [
        {"name": "Consulting", "description": "March", "unit_cost": "100", "quantity": "1",
         "discount": {"percent": "10"}, "tax": {"percent": "20"}},
        {"name": "Parts", "unit_cost": "50", "quantity": "2", "discount": {"amount": "15"}},
    ],
}


class TestItemFromDict(unittest.TestCase):

    def test_full_item(self):
        item = item_from_dict(SAMPLE["items"][0])

        self.assertEqual(item.name, "Consulting")
        self.assertEqual(item.description, "March")
        self.assertEqual(item.unit_cost, "100")
        self.assertEqual(item.discount, RawAdjustment(AdjustmentKind.PERCENT, "10"))
        self.assertEqual(item.tax, RawAdjustment(AdjustmentKind.PERCENT, "20"))

    def test_numbers_are_turned_into_strings(self):
        item = item_from_dict({"name": "x", "unit_cost": 10, "quantity": 3, "tax": {"amount": 2}})

        self.assertEqual(item.unit_cost, "10")
        self.assertEqual(item.quantity, "3")
        self.assertEqual(item.tax.magnitude, "2")

    def test_malformed_numbers_are_left_for_prepare(self):
        item = item_from_dict({"name": "x", "unit_cost": "10", "quantity": "abc"})
        self.assertEqual(item.quantity, "abc")

    def test_invalid_items(self):
        test_cases = [
            "not an object",
            {"unit_cost": "1", "quantity": "1"},
            {"name": "", "unit_cost": "1", "quantity": "1"},
            {"name": "x", "unit_cost": True, "quantity": "1"},
            {"name": "x", "unit_cost": [1], "quantity": "1"},
            {"name": "x", "unit_cost": "1", "quantity": "1", "discount": "10%"},
            {"name": "x", "unit_cost": "1", "quantity": "1", "discount": {}},
            {"name": "x", "unit_cost": "1", "quantity": "1", "tax": {"percent": "5", "amount": "1"}},
        ]

        for data in test_cases:
            with self.subTest(data=data):
                with self.assertRaises(DocumentError):
                    item_from_dict(data)


class TestDocumentFromDict(unittest.TestCase):

    def test_document(self):
        doc = document_from_dict(SAMPLE)

        self.assertEqual(doc.doc_type, "quotation")
        self.assertEqual(doc.ref, "Q-7")
        self.assertEqual(len(doc.items), 2)
        self.assertEqual(doc.options.currency, "USD")
        self.assertEqual(doc.title, "QUOTATION Ref. Q-7")

    def test_invalid_documents(self):
        test_cases = [
            [],
            {},
            {"items": []},
            {"items": SAMPLE["items"], "type": "receipt"},
            {"items": SAMPLE["items"], "options": {"unknown": 1}},
        ]

        for data in test_cases:
            with self.subTest(data=data):
                with self.assertRaises(DocumentError):
                    document_from_dict(data)


class TestLoadDocument(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, content):
        path = os.path.join(self.tmpdir.name, "doc.json")
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_load(self):
        doc = load_document(self._write(json.dumps(SAMPLE)))

        self.assertEqual(len(doc.items), 2)
        self.assertEqual(doc.options.margin_top, 12.5)

    def test_json_floats_keep_their_digits(self):
        path = self._write('{"items": [{"name": "x", "unit_cost": 19.99, "quantity": 0.1}]}')
        doc = load_document(path)

        self.assertEqual(doc.items[0].unit_cost, "19.99")
        self.assertEqual(doc.items[0].quantity, "0.1")

    def test_json_floats_in_exponent_form(self):
        path = self._write(
            '{"items": [{"name": "x", "unit_cost": 1.5e2, "quantity": 1E-7, "tax": {"percent": 2.5E+1}}]}'
        )
        item = load_document(path).items[0]

        self.assertEqual(item.unit_cost, "150")
        self.assertEqual(item.quantity, "0.0000001")
        self.assertEqual(item.tax.magnitude, "25")
        self.assertEqual(subtotal(prepare(item)), Decimal("0.000015"))

    def test_invalid_json(self):
        with self.assertRaises(DocumentError):
            load_document(self._write("{not json"))


if __name__ == '__main__':
    unittest.main()
