"""Unit ratio validator."""

from collections.abc import Sequence

from deckwarden.config import UNIT_RATIO_RANGE
from deckwarden.models.card import DeckCard
from deckwarden.models.validation import ValidationResult, ValidationRule
from deckwarden.validation.classification import (
    format_percent,
    in_range,
    is_unit_type,
    percentage,
    total_copies,
)


def unit_percentage(deck: Sequence[DeckCard]) -> float:
    """Share of copies whose type is a unit; 0.0 for an empty deck."""
    units = sum(entry.quantity for entry in deck if is_unit_type(entry.card))
    return percentage(units, total_copies(deck))


def validate_unit_ratio(rule: ValidationRule, deck: Sequence[DeckCard]) -> ValidationResult:
    """Check units make up UNIT_RATIO_RANGE percent of the deck."""
    unit_pct = unit_percentage(deck)
    low, high = UNIT_RATIO_RANGE

    if in_range(unit_pct, UNIT_RATIO_RANGE):
        return ValidationResult(
            rule=rule,
            is_valid=True,
            message=f"Good unit ratio ({format_percent(unit_pct)} units)",
        )

    return ValidationResult(
        rule=rule,
        is_valid=False,
        message=f"Unit ratio: {format_percent(unit_pct)} (recommended: {low:.0f}-{high:.0f}%)",
        details="Units provide board presence, support cards provide utility",
    )
