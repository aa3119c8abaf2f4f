"""
Opportunity reference encoding/decoding.
Run from project root: python -m pytest tests/test_opportunity_ref.py -v
"""
import unittest

from errors import InvalidReference
from services.opportunity_ref import OpportunityRef, decode, encode


class TestOpportunityRef(unittest.TestCase):
    def test_round_trip(self):
        for source in ("admin", "sme"):
            for n in (1, 7, 123456):
                ref = decode(encode(source, n))
                self.assertEqual(ref, OpportunityRef(source=source, id=n))

    def test_str_is_encoded_form(self):
        self.assertEqual(str(OpportunityRef(source="admin", id=12)), "admin-12")

    def test_legacy_numeric_means_sme(self):
        self.assertEqual(decode("42"), OpportunityRef(source="sme", id=42))

    def test_invalid_inputs(self):
        for raw in ("0", "-1", "admin-0", "foo-7", "admin-", "", None, "ADMIN-3", "sme-1.5", "1.5", " 4", "admin-3x"):
            with self.subTest(raw=raw):
                with self.assertRaises(InvalidReference):
                    decode(raw)

    def test_non_ascii_digits_rejected(self):
        with self.assertRaises(InvalidReference):
            decode("sme-٣")


if __name__ == "__main__":
    unittest.main()
