import unittest
from datetime import datetime, timezone

from linkdirectory.directory import approved_entries, build_row, format_timestamp


class TestBuildRow(unittest.TestCase):

    def test_row_with_enrichment(self):
        row = build_row("https://example.com", {"title": "Example", "description": "A site"})

        self.assertEqual(len(row), 5)
        self.assertEqual(row[1:], ["https://example.com", "Example", "A site", "Pending"])
        parsed = datetime.fromisoformat(row[0].replace("Z", "+00:00"))
        self.assertEqual(parsed.tzinfo, timezone.utc)

    def test_missing_enrichment_gives_empty_strings(self):
        for enriched in (None, {}, {"title": None, "description": None}):
            row = build_row("https://example.com", enriched)
            self.assertEqual(row[2], "")
            self.assertEqual(row[3], "")

    def test_timestamp_format(self):
        moment = datetime(2024, 5, 1, 12, 34, 56, 789000, tzinfo=timezone.utc)
        self.assertEqual(format_timestamp(moment), "2024-05-01T12:34:56.789Z")


class TestApprovedEntries(unittest.TestCase):

    def test_keeps_only_exact_approved_in_order(self):
        rows = [
            ["t1", "https://a.example", "A", "first", "Approved"],
            ["t2", "https://b.example", "B", "second", "Pending"],
            ["t3", "https://c.example", "C", "third", "Approved"],
            ["t4", "https://d.example", "D", "fourth", "approved"],
            ["t5", "https://e.example", "E", "fifth", ""],
            ["t6", "https://f.example", "F", "sixth", " Approved"],
        ]

        entries = approved_entries(rows)

        self.assertEqual(entries, [
            {"timestamp": "t1", "link": "https://a.example", "title": "A", "description": "first"},
            {"timestamp": "t3", "link": "https://c.example", "title": "C", "description": "third"},
        ])
        for entry in entries:
            self.assertNotIn("status", entry)

    def test_short_rows_are_not_approved(self):
        rows = [["t1", "https://a.example"], [], ["t2", "https://b.example", "", "", "Approved"]]
        entries = approved_entries(rows)
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0]["link"], "https://b.example")
        self.assertEqual(entries[0]["title"], "")


if __name__ == "__main__":
    unittest.main()
