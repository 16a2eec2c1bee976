"""
Cost curve validator.

Copies are bucketed by cost into low (0-2), mid (3-5) and high (6+).
A deck is balanced when all three bucket shares fall in their target
ranges at the same time.
"""

from collections.abc import Sequence

from deckwarden.config import (
    HIGH_COST_RANGE,
    LOW_COST_MAX,
    LOW_COST_RANGE,
    MID_COST_MAX,
    MID_COST_RANGE,
)
from deckwarden.models.card import DeckCard
from deckwarden.models.validation import ValidationResult, ValidationRule
from deckwarden.validation.classification import format_percent, in_range, percentage

COST_TARGETS = (
    f"Recommended: {LOW_COST_RANGE[0]:.0f}-{LOW_COST_RANGE[1]:.0f}% low cost (0-{LOW_COST_MAX}), "
    f"{MID_COST_RANGE[0]:.0f}-{MID_COST_RANGE[1]:.0f}% mid cost ({LOW_COST_MAX + 1}-{MID_COST_MAX}), "
    f"{HIGH_COST_RANGE[0]:.0f}-{HIGH_COST_RANGE[1]:.0f}% high cost ({MID_COST_MAX + 1}+)"
)


def cost_buckets(deck: Sequence[DeckCard]) -> tuple[int, int, int]:
    """
    Count copies per cost bucket.

    Missing costs count as 0.

    Returns:
        (low, mid, high) copy counts
    """
    low = mid = high = 0
    for entry in deck:
        cost = entry.card.cost or 0
        if cost <= LOW_COST_MAX:
            low += entry.quantity
        elif cost <= MID_COST_MAX:
            mid += entry.quantity
        else:
            high += entry.quantity
    return low, mid, high


def validate_cost_distribution(
    rule: ValidationRule, deck: Sequence[DeckCard]
) -> ValidationResult:
    """
    Check the share of low, mid and high cost copies.

    The message always reports all three percentages.
    """
    low, mid, high = cost_buckets(deck)
    total = low + mid + high

    low_pct = percentage(low, total)
    mid_pct = percentage(mid, total)
    high_pct = percentage(high, total)

    balanced = (
        in_range(low_pct, LOW_COST_RANGE)
        and in_range(mid_pct, MID_COST_RANGE)
        and in_range(high_pct, HIGH_COST_RANGE)
    )

    breakdown = (
        f"Low: {format_percent(low_pct)}, "
        f"Mid: {format_percent(mid_pct)}, "
        f"High: {format_percent(high_pct)}"
    )

    if balanced:
        return ValidationResult(
            rule=rule,
            is_valid=True,
            message=f"Balanced cost curve ({breakdown})",
        )

    return ValidationResult(
        rule=rule,
        is_valid=False,
        message=f"Cost curve needs balancing ({breakdown})",
        details=COST_TARGETS,
    )
