"""
Tests for the failure envelope.

Every failure outside the engine must be classified and explained;
no raw 500 reaches a client.
"""

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from deckwarden.main import app
from deckwarden.models.failure import (
    ApiResponse,
    DeckImportError,
    FailureKind,
    KnownError,
    OutcomeType,
    create_unknown_failure,
    finalize_response,
)


class TestFailureEnvelope:
    def test_known_failure_response_structure(self) -> None:
        response = ApiResponse.known_failure(
            kind=FailureKind.NOT_FOUND,
            message="Rule not found",
            detail="No rule 'banlist'",
        )

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.data is None
        assert response.failure is not None
        assert response.failure.kind == FailureKind.NOT_FOUND

    def test_unknown_failure_uses_standard_message(self) -> None:
        response = create_unknown_failure(RuntimeError("boom"))

        assert response.outcome == OutcomeType.UNKNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.kind == FailureKind.UNKNOWN
        assert "don't know why" in response.failure.message.lower()
        assert response.failure.detail == "RuntimeError"
        assert response.failure.suggestion

    def test_finalize_rejects_success_with_failure(self) -> None:
        bad = ApiResponse.known_failure(kind=FailureKind.UNKNOWN, message="x")
        bad.outcome = OutcomeType.SUCCESS

        with pytest.raises(ValueError):
            finalize_response(bad)

    def test_finalize_rejects_failure_without_detail(self) -> None:
        with pytest.raises(ValueError):
            finalize_response(ApiResponse(outcome=OutcomeType.KNOWN_FAILURE))


class TestKnownErrors:
    def test_known_error_converts_to_response(self) -> None:
        error = KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="Invalid deck",
            detail="Expected JSON",
            status_code=400,
        )

        response = error.to_response()

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.message == "Invalid deck"

    def test_deck_import_error(self) -> None:
        error = DeckImportError("invalid JSON", detail="line 1")

        assert error.kind == FailureKind.INVALID_INPUT
        assert error.status_code == 400
        assert "invalid JSON" in error.message
        assert error.suggestion


class TestExceptionHandlers:
    @pytest.fixture(autouse=True)
    def failing_routes(self):
        router = APIRouter()

        @router.get("/_test/known")
        async def raise_known() -> None:
            raise DeckImportError("deck name is required")

        @router.get("/_test/crash")
        async def raise_unknown() -> None:
            raise RuntimeError("unexpected")

        app.include_router(router)
        yield
        app.router.routes[:] = [
            route
            for route in app.router.routes
            if not getattr(route, "path", "").startswith("/_test")
        ]

    @pytest.fixture
    def client(self) -> TestClient:
        return TestClient(app, raise_server_exceptions=False)

    def test_known_error_returns_classified_4xx(self, client: TestClient) -> None:
        response = client.get("/_test/known")

        assert response.status_code == 400
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "invalid_input"

    def test_unexpected_error_returns_classified_500(self, client: TestClient) -> None:
        response = client.get("/_test/crash")

        assert response.status_code == 500
        data = response.json()
        assert data["outcome"] == "unknown_failure"
        assert data["failure"]["detail"] == "RuntimeError"
