"""Submission sink adapters - Receivers for validated form payloads."""

from .console import ConsoleSubmissionSink

__all__ = ["ConsoleSubmissionSink"]
