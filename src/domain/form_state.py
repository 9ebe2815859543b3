"""
Form state - Immutable registration form snapshot and its transitions.

FormState is never mutated in place. Each transition returns a new
snapshot, which keeps edit/submit/reset auditable and testable on their
own, without a service or session around them.

Transitions
===========

    edit    values[field] = value, errors[field] dropped, submitted untouched
    submit  no errors  -> errors = {}, submitted = True
            errors     -> errors replaced wholesale, submitted = False
    reset   back to initial_state()

Note: an edit after a successful submit leaves submitted = True until
the next submit or reset, even if the edited field is now invalid.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType

from .exceptions import InvalidFieldValue, UnknownField
from .fields import BOOLEAN_FIELDS, DEFAULT_VALUES, GENDER_CHOICES, FieldId, FieldValue


@dataclass(frozen=True)
class EditCommand:
    """
    A single field edit raised by the rendering surface.

    The field name is coerced to FieldId and the value is checked against
    the field's kind on construction, so an EditCommand that exists is
    always applicable.

    Raises:
        UnknownField: field is not one of the declared form fields
        InvalidFieldValue: value type (or gender choice) does not fit the field
    """

    field: FieldId
    value: FieldValue

    def __post_init__(self) -> None:
        try:
            field_id = FieldId(self.field)
        except ValueError:
            raise UnknownField(str(self.field)) from None
        object.__setattr__(self, "field", field_id)

        value = self.value
        if isinstance(value, Enum):
            value = value.value
            object.__setattr__(self, "value", value)

        if field_id in BOOLEAN_FIELDS:
            if not isinstance(value, bool):
                raise InvalidFieldValue(f"{field_id.value} expects a boolean value")
        elif isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise InvalidFieldValue(f"{field_id.value} expects a text or numeric value")

        if field_id is FieldId.GENDER and value not in GENDER_CHOICES:
            raise InvalidFieldValue(f"gender must be one of male, female, other (got {value!r})")


@dataclass(frozen=True)
class FormState:
    """
    Snapshot of the registration form.

    Attributes:
        values: Current value of each of the nine form fields
        errors: Field name -> message for fields that failed the last
            validation pass (absent or empty means no error)
        submitted: True only right after a fully valid submission
    """

    values: Mapping[str, FieldValue] = field(default_factory=lambda: dict(DEFAULT_VALUES))
    errors: Mapping[str, str] = field(default_factory=dict)
    submitted: bool = False

    def __post_init__(self) -> None:
        # Snapshots handed out by get_state() must not reach back into the form
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))

    @property
    def has_errors(self) -> bool:
        """True when at least one field carries a non-empty error message."""
        return any(self.errors.values())

    def error_for(self, field_id: FieldId | str) -> str:
        """Current error message for a field, or an empty string."""
        return self.errors.get(FieldId(field_id).value, "")

    def to_payload(self) -> dict[str, FieldValue]:
        """Plain copy of the field values, as handed to a submission sink."""
        return dict(self.values)


def initial_state() -> FormState:
    """Fresh form: text fields empty, checkboxes unchecked, gender unset."""
    return FormState()


def apply_edit(state: FormState, command: EditCommand) -> FormState:
    """
    Set one field's value and clear that field's error.

    The error is cleared optimistically: the new value is not re-validated.
    Other fields' errors and the submitted flag are left as they are.
    """
    name = command.field.value
    values = {**state.values, name: command.value}
    errors = {key: message for key, message in state.errors.items() if key != name}
    return replace(state, values=values, errors=errors)


def apply_submit(state: FormState, errors: Mapping[str, str]) -> FormState:
    """
    Record the outcome of a validation pass.

    Args:
        state: State that was validated
        errors: Validator output for state.values

    Returns:
        New state with errors replaced wholesale and submitted set
        only when no field failed.
    """
    if errors:
        return replace(state, errors=dict(errors), submitted=False)
    return replace(state, errors={}, submitted=True)
