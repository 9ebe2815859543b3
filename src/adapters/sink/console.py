"""
Console submission sink adapter - Implements SubmissionSink protocol.

This module provides a console-based implementation of the domain's
submission sink port, logging validated payloads for demo purposes.
"""

import logging

from src.domain.fields import FieldValue

logger = logging.getLogger(__name__)


class ConsoleSubmissionSink:
    """
    Implements SubmissionSink protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    No backend exists yet, so a valid submission only shows up in the logs.
    """

    def deliver(self, payload: dict[str, FieldValue]) -> None:
        """
        Log a submitted payload at INFO level.

        Args:
            payload: Field values of a valid submission
        """
        logger.info("Form submitted: %s", payload)
