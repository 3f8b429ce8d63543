import json
import unittest

from hostman.exporter import export_entries
from hostman.parser import parse_line


class ExportEntriesTest(unittest.TestCase):
    def test_schema_and_indent(self):
        entries = [
            parse_line("127.0.0.1 example.com example.org"),
            parse_line("#10.0.0.1 old.test"),
        ]

        text = export_entries(entries)

        self.assertEqual(
            [
                {
                    "address": "127.0.0.1",
                    "domain": "example.com",
                    "aliases": ["example.org"],
                    "disabled": False,
                    "raw": "127.0.0.1\texample.com example.org",
                },
                {
                    "address": "10.0.0.1",
                    "domain": "old.test",
                    "aliases": [],
                    "disabled": True,
                    "raw": "10.0.0.1\told.test",
                },
            ],
            json.loads(text),
        )
        self.assertTrue(text.startswith('[\n  {\n    "address": "127.0.0.1",\n'))

    def test_empty_list(self):
        self.assertEqual("[]", export_entries([]))


if __name__ == "__main__":
    unittest.main()
