"""
Deck validation API endpoints.

Thin HTTP layer over the validation engine. Card data arrives inline with
the request; nothing is looked up or stored.
"""

import logging

from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from deckwarden.config import settings
from deckwarden.models.failure import FailureKind, KnownError
from deckwarden.models.validation import DeckValidationSummary, ValidationResult
from deckwarden.parsers.deck_json import DeckCardEntry, aggregate_deck_cards
from deckwarden.validation import (
    VALIDATION_RULES,
    generate_suggestions,
    get_rule,
    overall_assessment,
    validate_deck,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["validation"])


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RuleResponse(_CamelModel):
    """A rule from the registry."""

    id: str
    name: str
    description: str
    category: str
    severity: str


class ValidationResultResponse(_CamelModel):
    """A failing rule result."""

    rule: RuleResponse
    is_valid: bool
    message: str
    details: str | None = None
    affected_cards: list[str] = Field(default_factory=list)


class SummaryResponse(_CamelModel):
    """Validation summary for one deck."""

    is_valid: bool
    total_results: int
    errors: list[ValidationResultResponse] = Field(default_factory=list)
    warnings: list[ValidationResultResponse] = Field(default_factory=list)
    info: list[ValidationResultResponse] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)


class DeckValidationRequest(BaseModel):
    """Request body for deck validation."""

    cards: list[DeckCardEntry] = Field(default_factory=list)
    aggregate: bool = Field(
        default=True,
        description="Merge entries that share a card id before validating",
    )


class DeckValidationResponse(_CamelModel):
    """Response for deck validation."""

    summary: SummaryResponse
    suggestions: list[str] = Field(default_factory=list)
    assessment: str


@router.get("/rules", response_model=list[RuleResponse])
async def list_rules() -> list[RuleResponse]:
    """List every validation rule in registry order."""
    return [RuleResponse(**rule.to_dict()) for rule in VALIDATION_RULES]


@router.get("/rules/{rule_id}", response_model=RuleResponse)
async def read_rule(rule_id: str) -> RuleResponse:
    """Fetch one rule by id."""
    try:
        rule = get_rule(rule_id)
    except KeyError:
        raise KnownError(
            kind=FailureKind.NOT_FOUND,
            message=f"Rule '{rule_id}' not found",
            suggestion="GET /rules lists every rule id.",
            status_code=status.HTTP_404_NOT_FOUND,
        ) from None
    return RuleResponse(**rule.to_dict())


@router.post("/validation/deck", response_model=DeckValidationResponse)
async def validate_deck_endpoint(request: DeckValidationRequest) -> DeckValidationResponse:
    """
    Validate a deck and return its summary, suggestions and overall verdict.

    Returns 422 when the deck has more entries than the configured limit.
    """
    if len(request.cards) > settings.max_deck_entries:
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message=f"Deck has more than {settings.max_deck_entries} card entries",
            detail=f"Received {len(request.cards)} entries",
            suggestion="Merge duplicate entries or split the request.",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    cards = [entry.to_deck_card() for entry in request.cards]
    if request.aggregate:
        cards = aggregate_deck_cards(cards)

    summary = validate_deck(cards)
    logger.info(
        "Validated deck with %d entries: valid=%s score=%d",
        len(cards),
        summary.is_valid,
        summary.score,
    )

    return DeckValidationResponse(
        summary=_summary_response(summary),
        suggestions=generate_suggestions(summary),
        assessment=overall_assessment(summary),
    )


def _summary_response(summary: DeckValidationSummary) -> SummaryResponse:
    return SummaryResponse(
        is_valid=summary.is_valid,
        total_results=summary.total_results,
        errors=[_result_response(r) for r in summary.errors],
        warnings=[_result_response(r) for r in summary.warnings],
        info=[_result_response(r) for r in summary.info],
        score=summary.score,
    )


def _result_response(result: ValidationResult) -> ValidationResultResponse:
    return ValidationResultResponse(
        rule=RuleResponse(**result.rule.to_dict()),
        is_valid=result.is_valid,
        message=result.message,
        details=result.details,
        affected_cards=list(result.affected_cards),
    )
