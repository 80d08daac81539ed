from field_validator.validators import (
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

# Field type: (Prompt, Result label, Validation class). Order is the console prompt order.
FIELD_TYPE_MAP: dict[str, tuple[str, str, type[Validator]]] = {
    "Email": ("Email Address", "Email", EmailValidator),
    "Password": ("Password", "Password", PasswordValidator),
    "DateOfBirth": ("Date of Birth (yyyy-MM-dd)", "Date of Birth", DateOfBirthValidator),
    "DateTime": ("Date & Time (yyyy-MM-ddTHH:mm:ss)", "Date & Time", DateTimeValidator),
    "Country": ("Country", "Country", CountryValidator),
    "URL": ("Website URL", "URL", UrlValidator),
    "String": ("String", "String", StringValidator),
    "Number": ("Number", "Number", NumberValidator),
}


def _entry(field_type: str) -> tuple[str, str, type[Validator]]:
    entry = FIELD_TYPE_MAP.get(field_type)
    if entry is None:
        raise ValueError(f"Invalid field type: {field_type}")
    return entry


def get_prompt(field_type: str) -> str:
    return _entry(field_type)[0]


def get_result_label(field_type: str) -> str:
    return _entry(field_type)[1]


def create_validator(field_type: str) -> Validator:
    _, _, validator_class = _entry(field_type)
    return validator_class()
