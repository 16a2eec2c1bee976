"""
Faction focus validator.

A faction is primary when it holds at least PRIMARY_FACTION_THRESHOLD
percent of the copies. A deck is focused when it has at most
MAX_PRIMARY_FACTIONS primary factions, or when its largest faction alone
reaches DOMINANT_FACTION_THRESHOLD.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from deckwarden.config import (
    DEFAULT_FACTION,
    DOMINANT_FACTION_THRESHOLD,
    MAX_PRIMARY_FACTIONS,
    PRIMARY_FACTION_THRESHOLD,
)
from deckwarden.models.card import DeckCard
from deckwarden.models.validation import ValidationResult, ValidationRule
from deckwarden.validation.classification import format_percent, percentage


@dataclass(frozen=True)
class FactionShare:
    """Copies of one faction and their share of the deck."""

    faction: str
    count: int
    percent: float


def faction_counts(deck: Sequence[DeckCard]) -> dict[str, int]:
    """Copies per faction in first-seen order. Missing factions count as Neutral."""
    counts: dict[str, int] = {}
    for entry in deck:
        faction = entry.card.faction or DEFAULT_FACTION
        counts[faction] = counts.get(faction, 0) + entry.quantity
    return counts


def primary_factions(counts: dict[str, int]) -> list[FactionShare]:
    """
    Factions at or above the primary threshold, largest first.

    Ties keep first-seen order.
    """
    total = sum(counts.values())
    shares = [
        FactionShare(faction=faction, count=count, percent=percentage(count, total))
        for faction, count in counts.items()
    ]
    primary = [share for share in shares if share.percent >= PRIMARY_FACTION_THRESHOLD]
    return sorted(primary, key=lambda share: share.count, reverse=True)


def validate_faction_consistency(
    rule: ValidationRule, deck: Sequence[DeckCard]
) -> ValidationResult:
    """
    Check the deck concentrates on a small number of factions.

    Args:
        rule: Registry descriptor for this check
        deck: Deck entries to inspect

    Returns:
        Result naming the primary factions, or all faction counts on failure
    """
    counts = faction_counts(deck)
    primary = primary_factions(counts)

    focused = (
        len(primary) <= MAX_PRIMARY_FACTIONS
        or primary[0].percent >= DOMINANT_FACTION_THRESHOLD
    )

    if focused:
        summary = ", ".join(
            f"{share.faction}: {format_percent(share.percent)}" for share in primary
        )
        return ValidationResult(
            rule=rule,
            is_valid=True,
            message=f"Good faction focus ({summary or 'no primary factions'})",
        )

    current = ", ".join(f"{faction} ({count})" for faction, count in counts.items())
    return ValidationResult(
        rule=rule,
        is_valid=False,
        message="Consider focusing on fewer factions for better synergy",
        details=f"Current factions: {current}",
    )
