"""Health check endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from deckwarden.validation import VALIDATION_RULES

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    rules: int


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    The rule registry is verified at import, so a running service always
    reports the full rule count.
    """
    return HealthResponse(status="healthy", rules=len(VALIDATION_RULES))
