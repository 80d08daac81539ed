from collections.abc import Callable

from field_validator.field_validations import (
    validate_country,
    validate_date_time,
    validate_dob,
    validate_email,
    validate_number,
    validate_password,
    validate_string,
    validate_url,
)


def contains_text(value: str | None) -> bool:
    return value is not None and value != ""


class Validator:
    tests: list[Callable[[str | None], bool]]

    def __init__(self, field_type: type):
        self.field_type = field_type

    def is_valid(self, value: str | None) -> bool:
        for test in self.tests:
            if not test(value):
                return False
        return True


class EmailValidator(Validator):
    def __init__(self):
        super().__init__(str)
        self.tests = [contains_text, validate_email]


class PasswordValidator(Validator):
    def __init__(self):
        super().__init__(str)
        self.tests = [contains_text, validate_password]


class DateOfBirthValidator(Validator):
    def __init__(self):
        super().__init__(str)
        self.tests = [contains_text, validate_dob]


class DateTimeValidator(Validator):
    def __init__(self):
        super().__init__(str)
        self.tests = [contains_text, validate_date_time]


class CountryValidator(Validator):
    def __init__(self, lookup=None):
        super().__init__(str)
        self.lookup = lookup
        self.tests = [contains_text, self._is_country]

    def _is_country(self, value: str | None) -> bool:
        return validate_country(value, self.lookup)


class UrlValidator(Validator):
    def __init__(self):
        super().__init__(str)
        self.tests = [contains_text, validate_url]


class StringValidator(Validator):
    def __init__(self):
        super().__init__(str)
        self.tests = [contains_text, validate_string]


class NumberValidator(Validator):
    def __init__(self):
        super().__init__(int)
        self.tests = [contains_text, validate_number]
