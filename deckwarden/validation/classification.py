"""
Card classification and deck arithmetic shared by the validators.

Legendary and unit detection match on substrings of the rarity and type
names. Keep those checks here so the matching rule is defined once.
"""

from collections.abc import Iterable

from deckwarden.models.card import Card, DeckCard


def is_legendary(card: Card) -> bool:
    """True if the rarity name contains "legendary" (any case)."""
    return card.rarity is not None and "legendary" in card.rarity.lower()


def is_unit_type(card: Card) -> bool:
    """True if the card type name contains "unit" (any case)."""
    return card.card_type is not None and "unit" in card.card_type.lower()


def total_copies(deck: Iterable[DeckCard]) -> int:
    """Sum of quantities across all deck entries."""
    return sum(entry.quantity for entry in deck)


def percentage(count: int, total: int) -> float:
    """Share of `count` in `total` as a percentage; 0.0 when total is 0."""
    if total <= 0:
        return 0.0
    return count / total * 100.0


def in_range(value: float, bounds: tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


def format_percent(value: float) -> str:
    return f"{value:.1f}%"
