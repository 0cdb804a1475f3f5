#!/usr/bin/env python3
"""
Tests for the command line interface.
"""

import json
import os
import tempfile
import unittest

from click.testing import CliRunner

from invoice_generator.cli import cli


DOCUMENT = {
    "type": "invoice",
    "ref": "INV-3",
    "items": [
        {"name": "Consulting", "unit_cost": "100", "quantity": "1",
         "discount": {"percent": "10"}, "tax": {"percent": "20"}},
        {"name": "Parts", "unit_cost": "50", "quantity": "2", "discount": {"amount": "15"}},
    ],
}


class TestCli(unittest.TestCase):
    """Test cases for the invoice-generator command."""

    def setUp(self):
        self.runner = CliRunner()
        self.tmpdir = tempfile.TemporaryDirectory()
        self.document = self._write("doc.json", DOCUMENT)

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, name, data):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f)
        return path

    def test_render(self):
        output = os.path.join(self.tmpdir.name, "out.pdf")
        result = self.runner.invoke(cli, ["render", self.document, "-o", output])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(os.path.exists(output))
        self.assertIn("Document written to", result.output)

    def test_render_default_output_path(self):
        result = self.runner.invoke(cli, ["render", self.document])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(os.path.exists(os.path.join(self.tmpdir.name, "doc.pdf")))

    def test_totals(self):
        result = self.runner.invoke(cli, ["totals", self.document, "--currency", "USD"])

        self.assertEqual(result.exit_code, 0, result.output)
        for expected in ("Consulting", "$108.00", "$85.00", "$193.00"):
            with self.subTest(expected=expected):
                self.assertIn(expected, result.output)

    def test_bad_item_aborts(self):
        broken = dict(DOCUMENT, items=[{"name": "Broken", "unit_cost": "10", "quantity": "abc"}])
        path = self._write("broken.json", broken)
        output = os.path.join(self.tmpdir.name, "broken.pdf")

        result = self.runner.invoke(cli, ["render", path, "-o", output])

        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("quantity", result.output)
        self.assertFalse(os.path.exists(output))

    def test_missing_file(self):
        result = self.runner.invoke(cli, ["totals", os.path.join(self.tmpdir.name, "nope.json")])
        self.assertNotEqual(result.exit_code, 0)


if __name__ == '__main__':
    unittest.main()
