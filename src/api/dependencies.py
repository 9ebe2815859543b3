"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from src.adapters.sessions.memory import InMemoryFormSessions
from src.adapters.sink.console import ConsoleSubmissionSink

# Module-level singleton - ConsoleSubmissionSink is stateless
_submission_sink = ConsoleSubmissionSink()


def get_submission_sink() -> ConsoleSubmissionSink:
    """Get console submission sink (singleton)."""
    return _submission_sink


def get_form_sessions(request: Request) -> InMemoryFormSessions:
    """
    Get form session registry from app state.

    The registry is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.form_sessions
