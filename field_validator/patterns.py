"""Pattern grammars for the field validators. Always use fullmatch()."""
import re

# Local part: word chars, '+' and '-', optionally dot-separated.
# Domain: labels of alphanumerics and '-', final label at least two chars.
EMAIL_REGEX = (
    r"\s*[_A-Za-z0-9+\-]+(\.[_A-Za-z0-9\-]+)*@"
    r"[A-Za-z0-9\-]+(\.[A-Za-z0-9_\-]+)*(\.[A-Za-z0-9_\-]{2,})\s*"
)

# At least one digit, lowercase, uppercase and special; no triple repeats;
# eight or more characters from the allowed alphabet.
PASSWORD_REGEX = (
    r"(?=.*[0-9])(?=.*[a-z])(?=.*[A-Z])(?=.*[@#$%^&+=!*])(?!.*(.)\1\1)"
    r"[a-zA-Z0-9@#$%^&+=!*]{8,}"
)

ALPHABETIC_REGEX = r"[a-zA-Z]+"
NUMERIC_REGEX = r"-?[0-9]+"

ISO_DATE_REGEX = r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
ISO_DATE_TIME_REGEX = (
    ISO_DATE_REGEX
    + r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})"
    r"(?::(?P<second>[0-9]{2})(?:\.(?P<fraction>[0-9]{1,9}))?)?"
)

URI_SCHEME_REGEX = r"[A-Za-z][A-Za-z0-9+.\-]*"
# Characters that never appear unescaped in a URI: whitespace, C0 and C1 controls and "<>\^`{|}
URI_ILLEGAL_CHAR_REGEX = r"[\s\x00-\x1f\x7f-\x9f\"<>\\^`{|}]"
URI_BAD_ESCAPE_REGEX = r"%(?![0-9A-Fa-f]{2})"

EMAIL_PATTERN = re.compile(EMAIL_REGEX, re.ASCII)
PASSWORD_PATTERN = re.compile(PASSWORD_REGEX)
ALPHABETIC_PATTERN = re.compile(ALPHABETIC_REGEX)
NUMERIC_PATTERN = re.compile(NUMERIC_REGEX)
ISO_DATE_PATTERN = re.compile(ISO_DATE_REGEX)
ISO_DATE_TIME_PATTERN = re.compile(ISO_DATE_TIME_REGEX)
URI_SCHEME_PATTERN = re.compile(URI_SCHEME_REGEX)
URI_ILLEGAL_CHAR_PATTERN = re.compile(URI_ILLEGAL_CHAR_REGEX)
URI_BAD_ESCAPE_PATTERN = re.compile(URI_BAD_ESCAPE_REGEX)
