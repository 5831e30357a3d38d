"""Employee Field Rules — pure validation shared by the API schemas and the form view.

Invariants:
    - Names must have at least MIN_NAME_LENGTH characters after trimming
    - Email must match EMAIL_PATTERN (local@domain.tld, no whitespace)
    - Each check returns an error message or None — never raises

Design Decisions:
    - One source of truth for messages: the API (400) and the form view
      (inline errors) report the same text for the same input
"""

import re

MIN_NAME_LENGTH = 2
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

FIELD_LABELS = {
    "first_name": "First name",
    "last_name": "Last name",
    "email": "Email",
}


def check_name(value: str | None, label: str) -> str | None:
    if value is None or not value.strip():
        return f"{label} is required"
    if len(value.strip()) < MIN_NAME_LENGTH:
        return f"{label} must be at least {MIN_NAME_LENGTH} characters"
    return None


def check_email(value: str | None) -> str | None:
    if value is None or not value.strip():
        return "Email is required"
    if not EMAIL_PATTERN.match(value):
        return "Please enter a valid email address"
    return None


def validate_employee_fields(
    first_name: str | None, last_name: str | None, email: str | None,
) -> dict[str, str]:
    """Run every rule; return {field: message} for the fields that fail."""
    errors: dict[str, str] = {}
    for field, message in (
        ("first_name", check_name(first_name, FIELD_LABELS["first_name"])),
        ("last_name", check_name(last_name, FIELD_LABELS["last_name"])),
        ("email", check_email(email)),
    ):
        if message:
            errors[field] = message
    return errors
