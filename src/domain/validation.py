"""
Form validation - Per-field rules for the registration form.

validate() is a pure function over a values snapshot. Every field is
checked on every call; within a single field the "required" check
short-circuits the format check, so a field yields at most one message.

Rules
=====

    firstName   required, then at least 2 characters
    lastName    required
    email       required, then local@domain.tld shape
    phone       required, then exactly 10 digits once non-digits are stripped
    age         required, then a number between 18 and 120 inclusive
    agreeTerms  must be checked
    gender      must be male, female or other
    comments, newsletter: no rule
"""

import math
import re
from collections.abc import Mapping

from .fields import FieldId, FieldValue, Gender

MESSAGES: dict[str, str] = {
    "first_name_required": "First name is required",
    "first_name_too_short": "First name must be at least 2 characters",
    "last_name_required": "Last name is required",
    "email_required": "Email is required",
    "email_invalid": "Please enter a valid email address",
    "phone_required": "Phone number is required",
    "phone_invalid": "Please enter a valid 10-digit phone number",
    "age_required": "Age is required",
    "age_out_of_range": "Age must be between 18 and 120",
    "terms_required": "You must agree to the terms and conditions",
    "gender_required": "Please select your gender",
}

FIRST_NAME_MIN_LENGTH = 2
PHONE_DIGITS = 10
MIN_AGE = 18
MAX_AGE = 120

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_NON_DIGIT_PATTERN = re.compile(r"\D", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_PREFIXED_INT_PATTERN = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)
_INFINITY_PATTERN = re.compile(r"[+-]?Infinity")

_GENDERS = frozenset(g.value for g in Gender)


def validate(values: Mapping[str, FieldValue]) -> dict[str, str]:
    """
    Run one validation pass over a complete values snapshot.

    Args:
        values: Field name -> value for all nine form fields

    Returns:
        Field name -> error message, holding only the fields that fail.
        An empty dict means the form is valid.
    """
    checks = (
        (FieldId.FIRST_NAME, _check_first_name),
        (FieldId.LAST_NAME, _check_last_name),
        (FieldId.EMAIL, _check_email),
        (FieldId.PHONE, _check_phone),
        (FieldId.AGE, _check_age),
        (FieldId.AGREE_TERMS, _check_agree_terms),
        (FieldId.GENDER, _check_gender),
    )

    errors: dict[str, str] = {}
    for field_id, check in checks:
        message = check(values[field_id.value])
        if message:
            errors[field_id.value] = message
    return errors


def parse_number(text: str) -> float | None:
    """
    Parse a numeric string the way a browser number conversion does.

    Surrounding whitespace is ignored. Accepts signed decimal literals
    with optional fraction and exponent, unsigned 0x/0o/0b integers and
    Infinity. Returns None for anything else, NaN included.
    """
    text = text.strip()
    if _DECIMAL_PATTERN.fullmatch(text):
        return float(text)
    if _PREFIXED_INT_PATTERN.fullmatch(text):
        return float(int(text, 0))
    if _INFINITY_PATTERN.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    return None


def _is_blank(value: FieldValue) -> bool:
    return not str(value).strip()


def _check_first_name(value: FieldValue) -> str | None:
    if _is_blank(value):
        return MESSAGES["first_name_required"]
    if len(str(value)) < FIRST_NAME_MIN_LENGTH:
        return MESSAGES["first_name_too_short"]
    return None


def _check_last_name(value: FieldValue) -> str | None:
    if _is_blank(value):
        return MESSAGES["last_name_required"]
    return None


def _check_email(value: FieldValue) -> str | None:
    if _is_blank(value):
        return MESSAGES["email_required"]
    if not _EMAIL_PATTERN.fullmatch(str(value)):
        return MESSAGES["email_invalid"]
    return None


def _check_phone(value: FieldValue) -> str | None:
    if _is_blank(value):
        return MESSAGES["phone_required"]
    if len(_NON_DIGIT_PATTERN.sub("", str(value))) != PHONE_DIGITS:
        return MESSAGES["phone_invalid"]
    return None


def _check_age(value: FieldValue) -> str | None:
    if _is_blank(value):
        return MESSAGES["age_required"]
    age = parse_number(str(value))
    # NaN never reaches here; None and out-of-range both fail
    if age is None or not MIN_AGE <= age <= MAX_AGE:
        return MESSAGES["age_out_of_range"]
    return None


def _check_agree_terms(value: FieldValue) -> str | None:
    if value is not True:
        return MESSAGES["terms_required"]
    return None


def _check_gender(value: FieldValue) -> str | None:
    if value not in _GENDERS:
        return MESSAGES["gender_required"]
    return None
