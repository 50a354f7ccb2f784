"""
ZIP to county / tax rate lookup, the static table, and the /api/zip-codes routes.
"""
import unittest

from data.arkansas_zip_data import COUNTY_TAX_RATES, ZIP_CODES
from services.zip_lookup import all_counties, lookup, search
from tests.helpers import ApiTestCase


class TestZipTable(unittest.TestCase):
    def test_every_county_has_a_rate(self):
        missing = sorted({county for _, _, county in ZIP_CODES if county not in COUNTY_TAX_RATES})
        self.assertEqual(missing, [])

    def test_zip_codes_are_five_digits(self):
        for zip_code, _, _ in ZIP_CODES:
            self.assertRegex(zip_code, r"^\d{5}$")


class TestLookup(unittest.TestCase):
    def test_known_zip(self):
        self.assertEqual(lookup("72401"), {"county": "Craighead", "city": "Jonesboro", "taxRate": 0.58})

    def test_unknown_zip(self):
        self.assertIsNone(lookup("00000"))

    def test_whitespace_is_ignored(self):
        self.assertEqual(lookup(" 72401 ")["county"], "Craighead")


class TestSearch(unittest.TestCase):
    def test_prefix_matches_first_and_truncated(self):
        results = search("724", 10)
        self.assertEqual(len(results), 10)
        for r in results:
            self.assertTrue(r["zip"].startswith("724"))
        expected = [z for z, _, _ in ZIP_CODES if z.startswith("724")][:10]
        self.assertEqual([r["zip"] for r in results], expected)

    def test_city_substring_is_case_insensitive(self):
        results = search("jonesboro", 10)
        self.assertTrue(results)
        for r in results:
            self.assertIn("jonesboro", r["city"].lower())

    def test_empty_query_returns_table_head(self):
        results = search("", 3)
        self.assertEqual([r["zip"] for r in results], [z for z, _, _ in ZIP_CODES[:3]])
        self.assertEqual(search("", 0), [])

    def test_no_duplicates_between_prefix_and_city_matches(self):
        results = search("72", 1000)
        zips = [r["zip"] for r in results]
        self.assertEqual(len(zips), len(set(zips)))


class TestCounties(unittest.TestCase):
    def test_sorted(self):
        counties = all_counties()
        self.assertEqual(counties, sorted(counties))
        self.assertIn("Craighead", counties)


class TestZipCodeApi(ApiTestCase):
    def test_lookup_endpoint(self):
        r = self.client.get("/api/zip-codes/72401")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["data"]["taxRate"], 0.58)

    def test_unknown_zip_is_404(self):
        r = self.client.get("/api/zip-codes/00000")
        self.assertEqual(r.status_code, 404)
        self.assertFalse(r.json()["success"])

    def test_search_endpoint(self):
        r = self.client.get("/api/zip-codes", params={"q": "724", "limit": 5})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(len(r.json()["data"]), 5)

    def test_counties_endpoint(self):
        r = self.client.get("/api/zip-codes/counties")
        self.assertEqual(r.status_code, 200)
        self.assertIn("Pulaski", r.json()["data"])


if __name__ == "__main__":
    unittest.main()
