"""Unit tests for the country name table."""
import threading
import unittest
from types import SimpleNamespace

from field_validator.country_lookup import CountryLookup, get_country_lookup
from field_validator.field_validations import validate_country


def _country(alpha_2: str, name: str, common_name: str | None = None) -> SimpleNamespace:
    if common_name is None:
        return SimpleNamespace(alpha_2=alpha_2, name=name)
    return SimpleNamespace(alpha_2=alpha_2, name=name, common_name=common_name)


class TestCountryLookup(unittest.TestCase):
    def setUp(self) -> None:
        self.lookup = CountryLookup(
            [
                _country("IE", "Ireland"),
                _country("BO", "Bolivia, Plurinational State of", "Bolivia"),
            ]
        )

    def test_code_for_known_name(self) -> None:
        self.assertEqual(self.lookup.code_for("Ireland"), "IE")

    def test_code_for_ignores_case_and_whitespace(self) -> None:
        self.assertEqual(self.lookup.code_for("  iReLaNd "), "IE")

    def test_common_name_is_indexed(self) -> None:
        self.assertEqual(self.lookup.code_for("Bolivia"), "BO")
        self.assertEqual(self.lookup.code_for("bolivia, plurinational state of"), "BO")

    def test_unknown_name(self) -> None:
        self.assertIsNone(self.lookup.code_for("Ireland!"))
        self.assertIsNone(self.lookup.code_for(""))
        self.assertIsNone(self.lookup.code_for(None))

    def test_len_and_contains(self) -> None:
        self.assertEqual(len(self.lookup), 3)
        self.assertIn("ireland", self.lookup)
        self.assertNotIn("France", self.lookup)

    def test_validate_country_uses_given_lookup(self) -> None:
        self.assertTrue(validate_country("Ireland", self.lookup))
        self.assertFalse(validate_country("France", self.lookup))


class TestDefaultCountryLookup(unittest.TestCase):
    def test_iso_catalog_names(self) -> None:
        lookup = CountryLookup()
        self.assertEqual(lookup.code_for("United States"), "US")
        self.assertEqual(lookup.code_for("united kingdom"), "GB")
        self.assertEqual(lookup.code_for("France"), "FR")

    def test_shared_lookup_is_built_once(self) -> None:
        self.assertIs(get_country_lookup(), get_country_lookup())

    def test_shared_lookup_from_many_threads(self) -> None:
        seen: list[CountryLookup] = []

        def worker() -> None:
            seen.append(get_country_lookup())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(seen), 8)
        self.assertTrue(all(lookup is seen[0] for lookup in seen))


if __name__ == "__main__":
    unittest.main()
