"""
Domain exceptions - Semantic error types for the registration form.

Field validation failures are NOT exceptions: they are reported through
the error mapping produced by the validator. These types cover contract
violations at the edges of the core (bad edit commands, missing sessions).
"""


class FormError(Exception):
    """Base class for registration form domain errors."""

    pass


class UnknownField(FormError):
    """Edit targets a field name outside the declared form fields."""

    pass


class InvalidFieldValue(FormError):
    """Edit value has the wrong type or an unsupported choice for its field."""

    pass


class FormSessionNotFound(FormError):
    """No form session exists for the given session id."""

    pass
