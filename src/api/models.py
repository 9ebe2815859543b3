"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from src.domain.form_state import FormState


class EditRequest(BaseModel):
    """Request model for a single field edit."""

    value: StrictBool | StrictStr | StrictInt | StrictFloat = Field(
        ...,
        description="New field value: boolean for agreeTerms/newsletter, text or number otherwise",
    )


class FormStateResponse(BaseModel):
    """Response model mirroring the current form state."""

    values: dict[str, StrictBool | StrictStr | StrictInt | StrictFloat]
    errors: dict[str, str]
    submitted: bool
    has_errors: bool

    @classmethod
    def from_state(cls, state: FormState) -> "FormStateResponse":
        """Build the response body from a domain FormState."""
        return cls(
            values=dict(state.values),
            errors=dict(state.errors),
            submitted=state.submitted,
            has_errors=state.has_errors,
        )


class SessionResponse(BaseModel):
    """Response model for a newly created form session."""

    session_id: str
    state: FormStateResponse


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
