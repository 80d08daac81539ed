"""Field validators: email, password, dates, country, URL, alphabetic and integer strings."""

from .country_lookup import CountryLookup, get_country_lookup
from .field_validations import (
    validate_country,
    validate_date_time,
    validate_dob,
    validate_email,
    validate_number,
    validate_password,
    validate_string,
    validate_url,
)
from .validators import (
    Validator,
    EmailValidator,
    PasswordValidator,
    DateOfBirthValidator,
    DateTimeValidator,
    CountryValidator,
    UrlValidator,
    StringValidator,
    NumberValidator,
)

__all__ = [
    "CountryLookup",
    "get_country_lookup",
    "validate_email",
    "validate_password",
    "validate_dob",
    "validate_date_time",
    "validate_country",
    "validate_url",
    "validate_string",
    "validate_number",
    "Validator",
    "EmailValidator",
    "PasswordValidator",
    "DateOfBirthValidator",
    "DateTimeValidator",
    "CountryValidator",
    "UrlValidator",
    "StringValidator",
    "NumberValidator",
]
