"""
Copy limit validators.

Both checks look at each deck entry on its own. Entries are not merged by
card id, so callers should aggregate duplicates before validating.
"""

from collections.abc import Callable, Sequence

from deckwarden.config import MAX_COPIES_PER_CARD, MAX_LEGENDARY_COPIES
from deckwarden.models.card import Card, DeckCard
from deckwarden.models.validation import ValidationResult, ValidationRule
from deckwarden.validation.classification import is_legendary


def validate_card_limit(rule: ValidationRule, deck: Sequence[DeckCard]) -> ValidationResult:
    """
    Flag any card included more than MAX_COPIES_PER_CARD times.

    Args:
        rule: Registry descriptor for this check
        deck: Deck entries to inspect

    Returns:
        Result listing offending card ids and names with their counts
    """
    violations = _over_limit(deck, MAX_COPIES_PER_CARD)

    if not violations:
        return ValidationResult(
            rule=rule,
            is_valid=True,
            message="All cards within copy limits",
        )

    return ValidationResult(
        rule=rule,
        is_valid=False,
        message=f"{len(violations)} card(s) exceed copy limit",
        details=f"Cards with too many copies: {_describe(violations)}",
        affected_cards=tuple(entry.card.id for entry in violations),
    )


def validate_legendary_limit(rule: ValidationRule, deck: Sequence[DeckCard]) -> ValidationResult:
    """Flag legendary cards included more than MAX_LEGENDARY_COPIES times."""
    violations = _over_limit(deck, MAX_LEGENDARY_COPIES, only=is_legendary)

    if not violations:
        return ValidationResult(
            rule=rule,
            is_valid=True,
            message="All legendary cards within limits",
        )

    return ValidationResult(
        rule=rule,
        is_valid=False,
        message=f"{len(violations)} legendary card(s) exceed limit",
        details=f"Legendary cards with multiple copies: {_describe(violations)}",
        affected_cards=tuple(entry.card.id for entry in violations),
    )


def _over_limit(
    deck: Sequence[DeckCard],
    limit: int,
    only: Callable[[Card], bool] | None = None,
) -> list[DeckCard]:
    """Entries whose quantity exceeds `limit`, in deck order."""
    return [
        entry
        for entry in deck
        if entry.quantity > limit and (only is None or only(entry.card))
    ]


def _describe(entries: list[DeckCard]) -> str:
    return ", ".join(f"{entry.card.name} ({entry.quantity} copies)" for entry in entries)
