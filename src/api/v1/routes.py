"""
API v1 routes.

Defines REST endpoints for the Registration Form API. Each form session
owns one form; the endpoints map one-to-one onto the form's event
handlers (edit, submit, reset) plus session creation and teardown.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.adapters.sessions.memory import InMemoryFormSessions
from src.api.dependencies import get_form_sessions
from src.api.models import EditRequest, ErrorResponse, FormStateResponse, SessionResponse
from src.domain.exceptions import FormSessionNotFound, InvalidFieldValue
from src.domain.fields import FieldId
from src.domain.registration import RegistrationFormService

router = APIRouter(tags=["v1"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Form session not found"}}


def _get_form(sessions: InMemoryFormSessions, session_id: str) -> RegistrationFormService:
    try:
        return sessions.get(session_id)
    except FormSessionNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Form session not found",
        ) from None


@router.post(
    "/forms",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start a registration form session",
    description="Create a new form session holding an empty registration form.",
)
async def create_form(
    sessions: InMemoryFormSessions = Depends(get_form_sessions),
) -> SessionResponse:
    """Create a form session and return its id with the initial form state."""
    session_id = sessions.create()
    form = sessions.get(session_id)
    return SessionResponse(
        session_id=session_id,
        state=FormStateResponse.from_state(form.get_state()),
    )


@router.get(
    "/forms/{session_id}",
    response_model=FormStateResponse,
    responses=_NOT_FOUND,
    summary="Get form state",
)
async def get_form(
    session_id: str,
    sessions: InMemoryFormSessions = Depends(get_form_sessions),
) -> FormStateResponse:
    """Return the current values, errors and submitted flag."""
    form = _get_form(sessions, session_id)
    return FormStateResponse.from_state(form.get_state())


@router.put(
    "/forms/{session_id}/fields/{field}",
    response_model=FormStateResponse,
    responses={
        **_NOT_FOUND,
        422: {"description": "Unknown field or value of the wrong type"},
    },
    summary="Edit a form field",
    description="Set one field's value. Any error shown for that field is cleared; "
    "the value is not re-validated until the next submit.",
)
async def edit_field(
    session_id: str,
    field: FieldId,
    request_data: EditRequest,
    sessions: InMemoryFormSessions = Depends(get_form_sessions),
) -> FormStateResponse:
    """
    Edit a single field.

    - **field**: One of the nine registration form fields
    - **value**: Boolean for agreeTerms/newsletter, text or number for all others
    """
    form = _get_form(sessions, session_id)
    try:
        state = form.edit(field, request_data.value)
    except InvalidFieldValue as exc:
        raise HTTPException(
            status_code=422,
            detail=str(exc),
        ) from None
    return FormStateResponse.from_state(state)


@router.post(
    "/forms/{session_id}/submit",
    response_model=FormStateResponse,
    responses=_NOT_FOUND,
    summary="Submit the form",
    description="Validate every field. Field errors are returned in the form state, "
    "not as an HTTP error.",
)
async def submit_form(
    session_id: str,
    sessions: InMemoryFormSessions = Depends(get_form_sessions),
) -> FormStateResponse:
    """Run validation and return the resulting state (submitted or with errors)."""
    form = _get_form(sessions, session_id)
    return FormStateResponse.from_state(form.submit())


@router.post(
    "/forms/{session_id}/reset",
    response_model=FormStateResponse,
    responses=_NOT_FOUND,
    summary="Reset the form",
)
async def reset_form(
    session_id: str,
    sessions: InMemoryFormSessions = Depends(get_form_sessions),
) -> FormStateResponse:
    """Clear all values and errors."""
    form = _get_form(sessions, session_id)
    return FormStateResponse.from_state(form.reset())


@router.delete(
    "/forms/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="End a form session",
)
async def delete_form(
    session_id: str,
    sessions: InMemoryFormSessions = Depends(get_form_sessions),
) -> Response:
    """Discard the session and its form state."""
    try:
        sessions.discard(session_id)
    except FormSessionNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Form session not found",
        ) from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)
