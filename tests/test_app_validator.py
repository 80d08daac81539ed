import io
import unittest

from app_validator import run, selected_field_types
from field_validator.validator_config import ValidatorConfig


class TestSelectedFieldTypes(unittest.TestCase):
    def test_all_by_default(self) -> None:
        self.assertEqual(len(selected_field_types(ValidatorConfig())), 8)

    def test_unknown_names_are_skipped(self) -> None:
        config = ValidatorConfig(fields=["Number", "Postcode", "Email"])
        with self.assertLogs("app_validator", level="WARNING"):
            selected = selected_field_types(config)
        self.assertEqual(selected, ["Number", "Email"])


class TestRun(unittest.TestCase):
    def test_full_session(self) -> None:
        stdin = io.StringIO(
            "test@example.com\n"
            "Short1!\n"
            "2000-01-01\n"
            "2024-02-21T12:34:56\n"
            " United States \n"
            "www.example.com\n"
            "abcd\n"
            "-1234\n"
        )
        stdout = io.StringIO()
        results = run(ValidatorConfig(), stdin=stdin, stdout=stdout)
        self.assertEqual(
            results,
            {
                "Email": True,
                "Password": False,
                "DateOfBirth": True,
                "DateTime": True,
                "Country": True,
                "URL": False,
                "String": True,
                "Number": True,
            },
        )
        output = stdout.getvalue()
        self.assertIn("Enter Email Address: Email is valid: true\n", output)
        self.assertIn("Password is valid: false\n", output)
        self.assertIn("Enter Date & Time (yyyy-MM-ddTHH:mm:ss): ", output)

    def test_whitespace_inside_line_is_kept(self) -> None:
        stdin = io.StringIO(" 1234\r\n")
        results = run(ValidatorConfig(fields=["Number"]), stdin=stdin, stdout=io.StringIO())
        self.assertEqual(results, {"Number": False})

    def test_stops_at_end_of_input(self) -> None:
        stdin = io.StringIO("abcd\n")
        stdout = io.StringIO()
        results = run(ValidatorConfig(fields=["String", "Number"]), stdin=stdin, stdout=stdout)
        self.assertEqual(results, {"String": True})
        self.assertIn("Enter Number: ", stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
