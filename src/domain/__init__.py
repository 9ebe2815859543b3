"""
Domain layer - Pure form logic with zero framework imports.

This package contains the registration form core: field declarations,
the validator, immutable form state with its transitions, and the
service a rendering surface drives. It defines its own port interfaces
for the collaborators it hands work to.
"""

from .exceptions import FormError, FormSessionNotFound, InvalidFieldValue, UnknownField
from .fields import BOOLEAN_FIELDS, DEFAULT_VALUES, FieldId, Gender
from .form_state import EditCommand, FormState, apply_edit, apply_submit, initial_state
from .ports import FormSessionStore, SubmissionSink
from .registration import RegistrationFormService
from .validation import MESSAGES, validate

__all__ = [
    "BOOLEAN_FIELDS",
    "DEFAULT_VALUES",
    "MESSAGES",
    "EditCommand",
    "FieldId",
    "FormError",
    "FormSessionNotFound",
    "FormSessionStore",
    "FormState",
    "Gender",
    "InvalidFieldValue",
    "RegistrationFormService",
    "SubmissionSink",
    "UnknownField",
    "apply_edit",
    "apply_submit",
    "initial_state",
    "validate",
]
