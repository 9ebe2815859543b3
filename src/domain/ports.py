"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the form core requires
from its surroundings. Adapters implement these protocols.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from .fields import FieldValue

if TYPE_CHECKING:
    from .registration import RegistrationFormService


class SubmissionSink(Protocol):
    """Port interface for handing off a successfully validated payload."""

    def deliver(self, payload: dict[str, FieldValue]) -> None:
        """
        Receive the form values of a valid submission.

        Called exactly once per successful submit(), never for a
        submission that produced field errors.

        Args:
            payload: Copy of all nine field values
        """
        ...


class FormSessionStore(Protocol):
    """Port interface for the registry of live form sessions."""

    def create(self) -> str:
        """
        Start a new form session with a fresh form.

        Returns:
            Opaque session id
        """
        ...

    def get(self, session_id: str) -> RegistrationFormService:
        """
        Look up the form service owning a session.

        Raises:
            FormSessionNotFound: If no session exists for session_id
        """
        ...

    def discard(self, session_id: str) -> None:
        """
        End a session, dropping its form state.

        Raises:
            FormSessionNotFound: If no session exists for session_id
        """
        ...
