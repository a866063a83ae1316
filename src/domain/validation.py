"""
Registration request validation.

Rules are checked in a fixed order and only the first violation is
reported.
"""

import re

from .models import RegistrationRequest

# Applied with fullmatch(). \d matches any Unicode decimal digit.
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
PHONE_PATTERN = re.compile(r"\+?\d{10,15}")
MIN_PASSWORD_LENGTH = 8

_PASSWORD_CLASSES = (
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"\d"),
    re.compile(r"[^A-Za-z\d]"),
)


def is_strong_password(password: str) -> bool:
    """8+ chars with a lowercase, an uppercase, a digit and a special character."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return False
    return all(pattern.search(password) for pattern in _PASSWORD_CLASSES)


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_registration(request: RegistrationRequest) -> str | None:
    """
    Check a registration request.

    Returns:
        None if the request is valid, otherwise the message of the
        first violated rule.
    """
    if is_blank(request.full_name):
        return "Full name is required"
    if is_blank(request.email):
        return "Email is required"
    if not EMAIL_PATTERN.fullmatch(request.email):
        return "Invalid email format"
    if is_blank(request.password):
        return "Password is required"
    if is_blank(request.confirm_password):
        return "Confirm password is required"
    if request.password != request.confirm_password:
        return "Passwords do not match"
    if not is_strong_password(request.password):
        return "Password must be 8+ chars, include upper, lower, number, special"
    if is_blank(request.phone_number):
        return "Phone number is required"
    if not PHONE_PATTERN.fullmatch(request.phone_number):
        return "Invalid phone number format (10-15 digits, optional + prefix)"
    return None
