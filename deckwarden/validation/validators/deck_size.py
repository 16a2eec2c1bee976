"""
Deck size validators.

Minimum size is a hard rule; maximum size is a consistency warning.
"""

from collections.abc import Sequence

from deckwarden.config import MAX_DECK_SIZE, MIN_DECK_SIZE
from deckwarden.models.card import DeckCard
from deckwarden.models.validation import ValidationResult, ValidationRule
from deckwarden.validation.classification import total_copies


def validate_min_deck_size(rule: ValidationRule, deck: Sequence[DeckCard]) -> ValidationResult:
    """
    Check the deck holds at least MIN_DECK_SIZE copies.

    Args:
        rule: Registry descriptor for this check
        deck: Deck entries to inspect

    Returns:
        Result reporting the total and, on failure, the shortfall
    """
    total = total_copies(deck)

    if total >= MIN_DECK_SIZE:
        return ValidationResult(
            rule=rule,
            is_valid=True,
            message=f"Deck size: {total} cards (valid)",
        )

    return ValidationResult(
        rule=rule,
        is_valid=False,
        message=f"Deck size: {total} cards (minimum {MIN_DECK_SIZE} required)",
        details=f"Add {MIN_DECK_SIZE - total} more cards to reach minimum deck size",
    )


def validate_max_deck_size(rule: ValidationRule, deck: Sequence[DeckCard]) -> ValidationResult:
    """Check the deck holds no more than MAX_DECK_SIZE copies."""
    total = total_copies(deck)

    if total <= MAX_DECK_SIZE:
        return ValidationResult(
            rule=rule,
            is_valid=True,
            message=f"Deck size: {total} cards (recommended)",
        )

    return ValidationResult(
        rule=rule,
        is_valid=False,
        message=f"Deck size: {total} cards (consider reducing to {MAX_DECK_SIZE} or fewer)",
        details=(
            "Large decks can reduce consistency. "
            f"Consider removing {total - MAX_DECK_SIZE} cards."
        ),
    )
