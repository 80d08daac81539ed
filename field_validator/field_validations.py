"""Field validators: each takes one text value and returns True or False.

None and the empty string are never valid. Only email and country trim
surrounding whitespace; the date, date-time and URL validators treat it as
malformed input.
"""
import datetime
import logging
from urllib.parse import urlsplit

from field_validator.country_lookup import CountryLookup, get_country_lookup
from field_validator.patterns import (
    ALPHABETIC_PATTERN,
    EMAIL_PATTERN,
    ISO_DATE_PATTERN,
    ISO_DATE_TIME_PATTERN,
    NUMERIC_PATTERN,
    PASSWORD_PATTERN,
    URI_BAD_ESCAPE_PATTERN,
    URI_ILLEGAL_CHAR_PATTERN,
    URI_SCHEME_PATTERN,
)

logger = logging.getLogger(__name__)

MIN_DOB_YEAR = 1900

# Space and the ASCII control characters.
_TRIM_CHARS = "".join(map(chr, range(33)))


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def validate_email(value: str | None) -> bool:
    if value is None or value == "":
        return False
    return EMAIL_PATTERN.fullmatch(value.strip(_TRIM_CHARS)) is not None


def validate_password(value: str | None) -> bool:
    """Digit, lowercase, uppercase and one of @#$%^&+=!*; 8+ chars; no char three times in a row."""
    if _is_blank(value):
        return False
    return PASSWORD_PATTERN.fullmatch(value) is not None


def validate_dob(value: str | None) -> bool:
    """YYYY-MM-DD, a real date between 1900-01-01 and today inclusive."""
    if _is_blank(value):
        return False
    match = ISO_DATE_PATTERN.fullmatch(value)
    if match is None:
        logger.debug("Date of birth %r is not in YYYY-MM-DD form", value)
        return False
    try:
        parsed = datetime.date(int(match["year"]), int(match["month"]), int(match["day"]))
    except ValueError as e:
        logger.debug("Could not parse date of birth %r: %s", value, e)
        return False
    return parsed <= datetime.date.today() and parsed.year >= MIN_DOB_YEAR


def validate_date_time(value: str | None) -> bool:
    """
    ISO local date-time, YYYY-MM-DDTHH:MM[:SS[.fraction]], no zone suffix.

    Any value that parses is accepted; there is no range check beyond the
    calendar and clock fields themselves.
    """
    if _is_blank(value):
        return False
    match = ISO_DATE_TIME_PATTERN.fullmatch(value)
    if match is None:
        logger.debug("Date-time %r is not in YYYY-MM-DDTHH:MM:SS form", value)
        return False
    # Fractions finer than a microsecond are dropped.
    fraction = (match["fraction"] or "").ljust(6, "0")[:6]
    try:
        datetime.datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"] or 0),
            int(fraction),
        )
    except ValueError as e:
        logger.debug("Could not parse date-time %r: %s", value, e)
        return False
    return True


def validate_country(value: str | None, lookup: CountryLookup | None = None) -> bool:
    """Case-insensitive match against the country table; surrounding whitespace is ignored."""
    if _is_blank(value):
        return False
    if lookup is None:
        lookup = get_country_lookup()
    return lookup.code_for(value) is not None


def validate_url(value: str | None) -> bool:
    """
    Generic URI syntax with a scheme. Any scheme is accepted, so
    ``mailto:`` and ``ftp://`` are as valid as ``http://``.
    """
    if _is_blank(value):
        return False
    illegal = URI_ILLEGAL_CHAR_PATTERN.search(value)
    if illegal is not None:
        logger.debug("Illegal character %r at index %d in URL %r", illegal.group(), illegal.start(), value)
        return False
    if URI_BAD_ESCAPE_PATTERN.search(value) is not None:
        logger.debug("Malformed escape sequence in URL %r", value)
        return False
    if value.count("#") > 1:
        logger.debug("More than one fragment delimiter in URL %r", value)
        return False
    try:
        parts = urlsplit(value)
    except ValueError as e:
        logger.debug("Could not parse URL %r: %s", value, e)
        return False
    if not parts.scheme:
        return False
    # urlsplit lower-cases the scheme; check it as written.
    scheme, _, rest = value.partition(":")
    if URI_SCHEME_PATTERN.fullmatch(scheme) is None:
        logger.debug("Invalid scheme %r in URL %r", scheme, value)
        return False
    if rest == "" or rest.startswith("#"):
        logger.debug("Expected scheme-specific part in URL %r", value)
        return False
    if rest.startswith("//") and not (parts.netloc or parts.path):
        logger.debug("Expected authority in URL %r", value)
        return False
    # Brackets are only allowed around an IPv6 host, not in a hierarchical path.
    if rest.startswith("/") and ("[" in parts.path or "]" in parts.path):
        logger.debug("Illegal character in path of URL %r", value)
        return False
    return True


def validate_string(value: str | None) -> bool:
    """Letters A-Z and a-z only."""
    if value is None or value == "":
        return False
    return ALPHABETIC_PATTERN.fullmatch(value) is not None


def validate_number(value: str | None) -> bool:
    """Whole number with an optional leading minus sign."""
    if value is None or value == "":
        return False
    return NUMERIC_PATTERN.fullmatch(value) is not None
