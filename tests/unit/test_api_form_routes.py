"""
Unit tests for API v1 form routes.

Tests endpoint responses against an in-memory session registry with a
mocked submission sink.
"""

from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.sessions.memory import InMemoryFormSessions
from src.api.v1.routes import router


@pytest.fixture
def app(sink: Mock) -> FastAPI:
    """Create test FastAPI application."""
    test_app = FastAPI()
    test_app.include_router(router, prefix="/v1")
    test_app.state.form_sessions = InMemoryFormSessions(sink=sink, max_sessions=10)
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the application."""
    return TestClient(app)


@pytest.fixture
def session_id(client: TestClient) -> str:
    """Create a form session and return its id."""
    return client.post("/v1/forms").json()["session_id"]


class TestCreateForm:
    """Tests for POST /v1/forms endpoint."""

    def test_create_returns_201_with_initial_state(self, client: TestClient) -> None:
        """New session comes back with an empty form."""
        response = client.post("/v1/forms")

        assert response.status_code == 201
        body = response.json()
        assert body["session_id"]
        assert body["state"]["values"]["firstName"] == ""
        assert body["state"]["values"]["agreeTerms"] is False
        assert body["state"]["errors"] == {}
        assert body["state"]["submitted"] is False


class TestGetForm:
    """Tests for GET /v1/forms/{session_id} endpoint."""

    def test_get_returns_state(self, client: TestClient, session_id: str) -> None:
        """Existing session returns its state."""
        response = client.get(f"/v1/forms/{session_id}")
        assert response.status_code == 200
        assert len(response.json()["values"]) == 9

    def test_unknown_session_returns_404(self, client: TestClient) -> None:
        """Unknown session id returns 404 with generic message."""
        response = client.get("/v1/forms/missing")
        assert response.status_code == 404
        assert response.json() == {"detail": "Form session not found"}


class TestEditField:
    """Tests for PUT /v1/forms/{session_id}/fields/{field} endpoint."""

    def test_edit_text_field(self, client: TestClient, session_id: str) -> None:
        """Text value is stored."""
        response = client.put(
            f"/v1/forms/{session_id}/fields/firstName", json={"value": "Jo"}
        )
        assert response.status_code == 200
        assert response.json()["values"]["firstName"] == "Jo"

    def test_edit_boolean_field(self, client: TestClient, session_id: str) -> None:
        """Boolean value is stored."""
        response = client.put(
            f"/v1/forms/{session_id}/fields/agreeTerms", json={"value": True}
        )
        assert response.status_code == 200
        assert response.json()["values"]["agreeTerms"] is True

    def test_edit_clears_field_error(self, client: TestClient, session_id: str) -> None:
        """Editing a field removes its error but keeps the others."""
        client.post(f"/v1/forms/{session_id}/submit")

        response = client.put(f"/v1/forms/{session_id}/fields/email", json={"value": "bad"})

        errors = response.json()["errors"]
        assert "email" not in errors
        assert errors["phone"] == "Phone number is required"

    def test_unknown_field_returns_422(self, client: TestClient, session_id: str) -> None:
        """Field names outside the form are rejected by path validation."""
        response = client.put(
            f"/v1/forms/{session_id}/fields/middleName", json={"value": "x"}
        )
        assert response.status_code == 422

    def test_wrong_value_type_returns_422(self, client: TestClient, session_id: str) -> None:
        """Text for a checkbox is rejected with the domain message."""
        response = client.put(
            f"/v1/forms/{session_id}/fields/newsletter", json={"value": "yes"}
        )
        assert response.status_code == 422
        assert response.json() == {"detail": "newsletter expects a boolean value"}

    def test_edit_numeric_age(self, client: TestClient, session_id: str) -> None:
        """JSON numbers are accepted for text fields and kept as numbers."""
        response = client.put(f"/v1/forms/{session_id}/fields/age", json={"value": 30})

        assert response.status_code == 200
        assert response.json()["values"]["age"] == 30

        errors = client.post(f"/v1/forms/{session_id}/submit").json()["errors"]
        assert "age" not in errors

    @pytest.mark.parametrize("value", [1, 0, "true"])
    def test_checkbox_rejects_non_boolean(
        self, client: TestClient, session_id: str, value: object
    ) -> None:
        """Numbers and strings are not coerced into checkbox booleans."""
        response = client.put(
            f"/v1/forms/{session_id}/fields/agreeTerms", json={"value": value}
        )
        assert response.status_code == 422
        assert client.get(f"/v1/forms/{session_id}").json()["values"]["agreeTerms"] is False

    def test_text_field_rejects_boolean(self, client: TestClient, session_id: str) -> None:
        """JSON booleans are not accepted for text fields."""
        response = client.put(
            f"/v1/forms/{session_id}/fields/firstName", json={"value": True}
        )
        assert response.status_code == 422
        assert response.json() == {"detail": "firstName expects a text or numeric value"}

    def test_unknown_gender_returns_422(self, client: TestClient, session_id: str) -> None:
        """Gender outside the options is rejected."""
        response = client.put(
            f"/v1/forms/{session_id}/fields/gender", json={"value": "robot"}
        )
        assert response.status_code == 422

    def test_missing_value_returns_422(self, client: TestClient, session_id: str) -> None:
        """Request body must carry a value."""
        response = client.put(f"/v1/forms/{session_id}/fields/firstName", json={})
        assert response.status_code == 422

    def test_edit_unknown_session_returns_404(self, client: TestClient) -> None:
        """Edits on unknown sessions return 404."""
        response = client.put("/v1/forms/missing/fields/firstName", json={"value": "Jo"})
        assert response.status_code == 404


class TestSubmitForm:
    """Tests for POST /v1/forms/{session_id}/submit endpoint."""

    def test_invalid_submit_returns_200_with_errors(
        self, client: TestClient, session_id: str, sink: Mock
    ) -> None:
        """Field errors are part of the state, not an HTTP error."""
        response = client.post(f"/v1/forms/{session_id}/submit")

        assert response.status_code == 200
        body = response.json()
        assert body["submitted"] is False
        assert body["has_errors"] is True
        assert len(body["errors"]) == 7
        sink.deliver.assert_not_called()

    def test_valid_submit(
        self, client: TestClient, session_id: str, sink: Mock, valid_values: dict
    ) -> None:
        """Valid form is submitted and delivered to the sink."""
        for name, value in valid_values.items():
            client.put(f"/v1/forms/{session_id}/fields/{name}", json={"value": value})

        response = client.post(f"/v1/forms/{session_id}/submit")

        assert response.status_code == 200
        assert response.json()["submitted"] is True
        assert response.json()["errors"] == {}
        sink.deliver.assert_called_once_with(valid_values)

    def test_submit_unknown_session_returns_404(self, client: TestClient) -> None:
        """Submitting an unknown session returns 404."""
        assert client.post("/v1/forms/missing/submit").status_code == 404


class TestResetForm:
    """Tests for POST /v1/forms/{session_id}/reset endpoint."""

    def test_reset_clears_values_and_errors(self, client: TestClient, session_id: str) -> None:
        """Reset returns the initial state."""
        client.put(f"/v1/forms/{session_id}/fields/firstName", json={"value": "J"})
        client.post(f"/v1/forms/{session_id}/submit")

        response = client.post(f"/v1/forms/{session_id}/reset")

        body = response.json()
        assert response.status_code == 200
        assert body["values"]["firstName"] == ""
        assert body["errors"] == {}
        assert body["submitted"] is False


class TestDeleteForm:
    """Tests for DELETE /v1/forms/{session_id} endpoint."""

    def test_delete_returns_204(self, client: TestClient, session_id: str) -> None:
        """Deleted session is gone afterwards."""
        response = client.delete(f"/v1/forms/{session_id}")

        assert response.status_code == 204
        assert client.get(f"/v1/forms/{session_id}").status_code == 404

    def test_delete_unknown_returns_404(self, client: TestClient) -> None:
        """Deleting an unknown session returns 404."""
        assert client.delete("/v1/forms/missing").status_code == 404
