"""
Form fields - Identifiers and defaults for the registration form.

This module declares the fixed set of fields the registration form
collects, which of them are boolean checkboxes, and the value every
field starts out with.
"""

from enum import Enum


class FieldId(str, Enum):
    """
    Closed set of registration form field names.

    Values match the keys used in FormState.values and FormState.errors.
    """

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    PHONE = "phone"
    AGE = "age"
    AGREE_TERMS = "agreeTerms"
    NEWSLETTER = "newsletter"
    GENDER = "gender"
    COMMENTS = "comments"


class Gender(str, Enum):
    """Selectable gender options. Unset is represented by an empty string."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


BOOLEAN_FIELDS = frozenset({FieldId.AGREE_TERMS, FieldId.NEWSLETTER})

# Gender values accepted by an edit; "" clears the selection
GENDER_CHOICES = frozenset({"", *(g.value for g in Gender)})

# Text fields also take raw numbers as the rendering surface provides them
FieldValue = str | bool | int | float

DEFAULT_VALUES: dict[str, FieldValue] = {
    field.value: (False if field in BOOLEAN_FIELDS else "") for field in FieldId
}
