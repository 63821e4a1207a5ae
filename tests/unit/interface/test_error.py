"""Unit tests for HTTP error mapping and request helpers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from qna.config import PaginationSettings
from qna.domain.error import (
    AuthenticationError,
    InvalidOperationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
    invalid_input,
)
from qna.domain.value import Username
from qna.interface.api.dependencies import bearer_token, resolve_limit
from qna.interface.error import register_error_handlers, status_for
from qna.util.jwt import JWTError


class TestStatusFor:
    """Tests for domain error to status code mapping."""

    @pytest.mark.parametrize(
        "error, expected",
        [
            (NotFoundError("Question", "abc"), 404),
            (NotAuthorizedError("answer", "abc", "user"), 403),
            (AuthenticationError(), 401),
            (JWTError("Token has expired"), 401),
            (ValidationError("Nothing to update"), 400),
            (InvalidOperationError("You cannot vote on your own content"), 400),
        ],
    )
    def test_status_codes(self, error, expected):
        assert status_for(error) == expected


class TestBearerToken:
    """Tests for Authorization header parsing."""

    def test_extracts_token(self):
        assert bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_scheme_is_case_insensitive(self):
        assert bearer_token("bearer abc") == "abc"

    def test_missing_or_other_scheme(self):
        assert bearer_token(None) is None
        assert bearer_token("Basic dXNlcjpwYXNz") is None
        assert bearer_token("Bearer   ") is None


class TestResolveLimit:
    """Tests for page size defaults."""

    def test_default_and_cap(self):
        settings = PaginationSettings(default_limit=10, max_limit=100)
        assert resolve_limit(None, settings) == 10
        assert resolve_limit(25, settings) == 25
        assert resolve_limit(500, settings) == 100


class TestInvalidInput:
    """Tests for reporting bad client input as a domain error."""

    def test_model_failure_becomes_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            with invalid_input():
                Username("no spaces allowed")

        assert "Value error" not in str(exc_info.value)

    def test_other_errors_pass_through(self):
        with pytest.raises(KeyError):
            with invalid_input():
                raise KeyError("missing")


class TestRegisteredHandlers:
    """Tests for the handlers installed on an application."""

    @pytest.fixture
    def client(self):
        app = FastAPI()
        register_error_handlers(app)

        @app.get("/invalid")
        async def invalid():
            raise ValidationError("Nothing to update")

        @app.get("/broken")
        async def broken():
            raise ValueError("A user can only vote once per question or answer")

        return TestClient(app, raise_server_exceptions=False)

    def test_domain_validation_error_is_400(self, client):
        response = client.get("/invalid")
        assert response.status_code == 400
        assert response.json() == {"error": "Nothing to update"}

    def test_internal_value_error_is_500(self, client):
        response = client.get("/broken")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
