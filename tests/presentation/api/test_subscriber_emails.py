"""Tests for the subscriber emails API router."""

from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.newsletter.application.exceptions import InvalidEmailError
from app.newsletter.domain.services.email_syntax import SimpleEmailSyntax
from app.newsletter.infrastructure.validation import get_email_syntax_check
from app.newsletter.presentation.api.subscriber_emails import router


@pytest.fixture
def app() -> FastAPI:
    """Create a test FastAPI app with the subscriber emails router."""
    app = FastAPI()
    app.include_router(router, prefix="/api")
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app)


class TestValidateSubscriberEmail:
    """Tests for POST /api/subscriber-emails."""

    def test_valid_email(self, client: TestClient) -> None:
        """Test that a valid address is echoed back unchanged."""
        response = client.post(
            "/api/subscriber-emails",
            json={"email": "Ursula@Example.com"},
        )

        assert response.status_code == 200
        assert response.json() == {"email": "Ursula@Example.com"}

    @pytest.mark.parametrize("raw", ["", "ursula.com", "ursula@", "@gmail.com"])
    def test_invalid_email(self, client: TestClient, raw: str) -> None:
        """Test 400 response with a displayable message."""
        response = client.post("/api/subscriber-emails", json={"email": raw})

        assert response.status_code == 400
        assert response.json()["detail"] == f"{raw} is not a valid subscriber email."

    def test_missing_email_field(self, client: TestClient) -> None:
        """Test request body validation."""
        response = client.post("/api/subscriber-emails", json={})

        assert response.status_code == 422

    def test_uses_configured_predicate(self, app: FastAPI, client: TestClient) -> None:
        """Test that the syntax check is injected through the dependency."""
        app.dependency_overrides[get_email_syntax_check] = lambda: SimpleEmailSyntax()

        response = client.post(
            "/api/subscriber-emails",
            json={"email": "ñoñó@example.com"},
        )

        assert response.status_code == 400

    def test_use_case_error_is_mapped(self, client: TestClient) -> None:
        """Test that InvalidEmailError from the use case becomes a 400."""
        with patch(
            "app.newsletter.presentation.api.subscriber_emails.ParseSubscriberEmailUseCase"
        ) as mock_use_case_class:
            mock_use_case = Mock()
            mock_use_case.execute.side_effect = InvalidEmailError("ursula.com")
            mock_use_case_class.return_value = mock_use_case

            response = client.post(
                "/api/subscriber-emails",
                json={"email": "ursula.com"},
            )

            assert response.status_code == 400
            assert response.json()["detail"] == "ursula.com is not a valid subscriber email."
