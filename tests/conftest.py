"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fully valid set of registration form values
- Form services wired to mock submission sinks
"""

from unittest.mock import Mock

import pytest

from src.domain.registration import RegistrationFormService


@pytest.fixture
def valid_values() -> dict[str, str | bool]:
    """Registration values that pass every rule."""
    return {
        "firstName": "Jo",
        "lastName": "Lin",
        "email": "jo@x.com",
        "phone": "(555) 123-4567",
        "age": "30",
        "agreeTerms": True,
        "newsletter": False,
        "gender": "other",
        "comments": "",
    }


@pytest.fixture
def sink() -> Mock:
    """Mock submission sink."""
    return Mock()


@pytest.fixture
def form(sink: Mock) -> RegistrationFormService:
    """Fresh form service backed by a mock sink."""
    return RegistrationFormService(sink=sink)


@pytest.fixture
def filled_form(form: RegistrationFormService, valid_values: dict) -> RegistrationFormService:
    """Form service with every field edited to a valid value."""
    for name, value in valid_values.items():
        form.edit(name, value)
    return form
