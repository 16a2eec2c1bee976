"""
Level spread validator.

A deck is spread well when it covers at least MIN_DISTINCT_LEVELS levels
and its early-game level makes up at least MIN_LOW_LEVEL_PERCENT of the
copies. The early-game level is level 0, or level 1 when the deck has no
level-0 cards; the two are never added together.
"""

from collections.abc import Sequence

from deckwarden.config import EARLY_LEVELS, MIN_DISTINCT_LEVELS, MIN_LOW_LEVEL_PERCENT
from deckwarden.models.card import DeckCard
from deckwarden.models.validation import ValidationResult, ValidationRule
from deckwarden.validation.classification import format_percent, percentage


def level_counts(deck: Sequence[DeckCard]) -> dict[int, int]:
    """Copies per level, keyed in ascending level order. Missing levels count as 0."""
    counts: dict[int, int] = {}
    for entry in deck:
        level = entry.card.level or 0
        counts[level] = counts.get(level, 0) + entry.quantity
    return dict(sorted(counts.items()))


def early_level_copies(counts: dict[int, int]) -> int:
    """Copies at the lowest early-game level present, or 0."""
    return next((counts[level] for level in EARLY_LEVELS if counts.get(level)), 0)


def validate_level_distribution(
    rule: ValidationRule, deck: Sequence[DeckCard]
) -> ValidationResult:
    counts = level_counts(deck)
    total = sum(counts.values())

    low_level = early_level_copies(counts)
    low_pct = percentage(low_level, total)

    balanced = len(counts) >= MIN_DISTINCT_LEVELS and low_pct >= MIN_LOW_LEVEL_PERCENT

    distribution = ", ".join(
        f"Level {level}: {format_percent(percentage(count, total))}"
        for level, count in counts.items()
    )
    distribution = distribution or "no cards"

    if balanced:
        return ValidationResult(
            rule=rule,
            is_valid=True,
            message=f"Good level distribution ({distribution})",
        )

    return ValidationResult(
        rule=rule,
        is_valid=False,
        message=f"Level distribution needs balancing ({distribution})",
        details=(
            "Include cards from multiple levels, with enough low-level cards for early game"
        ),
    )
