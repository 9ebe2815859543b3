"""Form session adapters - Registries of live form sessions."""

from .memory import InMemoryFormSessions

__all__ = ["InMemoryFormSessions"]
