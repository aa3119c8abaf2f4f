"""Small helpers shared by the services."""
import unittest
from datetime import datetime, timedelta, timezone

from utils import clean_text, field_aliases, isoformat_utc


class TestFieldAliases(unittest.TestCase):
    def test_snake_and_camel_spellings(self):
        aliases = field_aliases(["title", "sub_industry", "is_active"])
        self.assertEqual(aliases["sub_industry"], "sub_industry")
        self.assertEqual(aliases["subIndustry"], "sub_industry")
        self.assertEqual(aliases["isActive"], "is_active")
        self.assertNotIn("SubIndustry", aliases)
        self.assertNotIn("Title", aliases)


class TestIsoformatUtc(unittest.TestCase):
    def test_naive_values_read_as_utc(self):
        self.assertEqual(isoformat_utc(datetime(2024, 1, 1, 9, 30)), "2024-01-01T09:30:00+00:00")

    def test_aware_values_keep_their_offset(self):
        value = datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)
        self.assertEqual(isoformat_utc(value), "2024-01-01T09:30:00+00:00")
        windhoek = timezone(timedelta(hours=2))
        self.assertEqual(isoformat_utc(value.astimezone(windhoek)), "2024-01-01T11:30:00+02:00")

    def test_none(self):
        self.assertIsNone(isoformat_utc(None))


class TestCleanText(unittest.TestCase):
    def test_trims_and_blanks_to_none(self):
        self.assertEqual(clean_text("  Solar "), "Solar")
        self.assertIsNone(clean_text("   "))
        self.assertIsNone(clean_text(None))


if __name__ == "__main__":
    unittest.main()
