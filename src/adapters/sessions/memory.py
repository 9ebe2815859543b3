"""
In-memory form sessions adapter - Implements FormSessionStore protocol.

Each session owns one RegistrationFormService. Sessions live only as
long as the process; form state is never persisted.
"""

import logging
import secrets
from collections import OrderedDict

from src.domain.exceptions import FormSessionNotFound
from src.domain.ports import SubmissionSink
from src.domain.registration import RegistrationFormService

logger = logging.getLogger(__name__)


class InMemoryFormSessions:
    """
    Implements FormSessionStore protocol with a bounded in-process dict.

    Once max_sessions is reached, creating a session evicts the oldest one.
    """

    def __init__(self, sink: SubmissionSink, max_sessions: int = 1000) -> None:
        """
        Initialize the registry.

        Args:
            sink: Submission sink shared by every session's form service
            max_sessions: Upper bound on live sessions (must be >= 1)
        """
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._sink = sink
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, RegistrationFormService] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self) -> str:
        """Start a session with a fresh form and return its id."""
        while len(self._sessions) >= self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted form session %s (limit %s reached)", evicted, self._max_sessions)

        session_id = secrets.token_urlsafe(16)
        self._sessions[session_id] = RegistrationFormService(sink=self._sink)
        logger.info("Created form session %s", session_id)
        return session_id

    def get(self, session_id: str) -> RegistrationFormService:
        """
        Look up a session's form service.

        Raises:
            FormSessionNotFound: If no session exists for session_id
        """
        try:
            return self._sessions[session_id]
        except KeyError:
            raise FormSessionNotFound(session_id) from None

    def discard(self, session_id: str) -> None:
        """
        Drop a session and its form state.

        Raises:
            FormSessionNotFound: If no session exists for session_id
        """
        if self._sessions.pop(session_id, None) is None:
            raise FormSessionNotFound(session_id)
        logger.info("Discarded form session %s", session_id)
