"""
Validators — Regex rules shared by every public form.
"""
import re

NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MOBILE_PATTERN = re.compile(r"^[0-9]{10}$")

REQUIRED_MESSAGE = "All fields are required"
NAME_MESSAGE = "Name should contain only alphabets and spaces"
EMAIL_MESSAGE = "Invalid email format"
MOBILE_MESSAGE = "Mobile number should be 10 digits"


def is_blank(value) -> bool:
    """Values a form treats as not filled in: absent, empty or zero."""
    if isinstance(value, bool):
        return False
    return value is None or value == "" or value == 0


def validate_name(name: str | None) -> bool:
    """Letters and spaces only (e.g. "Asha Rao")."""
    if not name:
        return False
    return bool(NAME_PATTERN.fullmatch(name))


def validate_email(email: str | None) -> bool:
    if not email:
        return False
    return bool(EMAIL_PATTERN.fullmatch(email))


def validate_mobile(mobile: str | None) -> bool:
    """Exactly 10 digits, no country code."""
    if not mobile:
        return False
    return bool(MOBILE_PATTERN.fullmatch(mobile))


def check_form(values: dict, required: tuple, name_field: str = "name") -> None:
    """Apply the form rules in order; raise ValueError with the first violation.

    Order: required fields, then name, email and mobile (each only if present
    in ``values``).
    """
    if any(is_blank(values.get(field)) for field in required):
        raise ValueError(REQUIRED_MESSAGE)

    if values.get(name_field) is not None and not validate_name(values[name_field]):
        raise ValueError(NAME_MESSAGE)

    if values.get("email") is not None and not validate_email(values["email"]):
        raise ValueError(EMAIL_MESSAGE)

    if values.get("mobile") not in (None, "") and not validate_mobile(values["mobile"]):
        raise ValueError(MOBILE_MESSAGE)
