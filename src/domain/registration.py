"""
Registration form service - Owns one form's state and applies events.

This module contains the event handlers a rendering surface calls:
edit, submit and reset. Each handler replaces the current FormState
with the result of a pure transition from form_state; submit is the
only place the validator runs.
"""

import logging
from dataclasses import dataclass, field

from .fields import FieldId, FieldValue
from .form_state import EditCommand, FormState, apply_edit, apply_submit, initial_state
from .ports import SubmissionSink
from .validation import validate

logger = logging.getLogger(__name__)


@dataclass
class RegistrationFormService:
    """
    Domain service for a single registration form session.

    Holds the session's FormState and the sink that receives the payload
    of a valid submission.
    """

    sink: SubmissionSink
    state: FormState = field(default_factory=initial_state)

    def get_state(self) -> FormState:
        """Return the current (immutable) form snapshot."""
        return self.state

    def edit(self, field_name: FieldId | str, value: FieldValue) -> FormState:
        """
        Set a field's value and clear its error.

        Args:
            field_name: One of the nine form field names
            value: bool for agreeTerms/newsletter, text or number for everything else

        Returns:
            The new form state

        Raises:
            UnknownField: If field_name is not a form field
            InvalidFieldValue: If value does not fit the field
        """
        command = EditCommand(field=field_name, value=value)
        self.state = apply_edit(self.state, command)
        logger.debug("Edited field %s", command.field.value)
        return self.state

    def submit(self) -> FormState:
        """
        Validate the current values and record the outcome.

        On success the errors are cleared, submitted is set and the
        payload is handed to the sink. On failure the errors are replaced
        by the validation result and submitted is cleared.

        Returns:
            The new form state
        """
        errors = validate(self.state.values)
        self.state = apply_submit(self.state, errors)

        if errors:
            logger.debug("Submission rejected, invalid fields: %s", ", ".join(errors))
        else:
            self.sink.deliver(self.state.to_payload())
        return self.state

    def reset(self) -> FormState:
        """Discard all values and errors, returning the form to its defaults."""
        self.state = initial_state()
        logger.debug("Form reset")
        return self.state
