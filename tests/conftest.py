from collections.abc import Callable
from typing import Any

import pytest

from deckwarden.models.card import Card, DeckCard

EntryFactory = Callable[..., DeckCard]


@pytest.fixture
def make_entry() -> EntryFactory:
    """Factory for deck entries with sensible card defaults."""

    def _make(
        card_id: str = "GD01-001",
        quantity: int = 1,
        category: str | None = "main",
        **card_fields: Any,
    ) -> DeckCard:
        fields: dict[str, Any] = {"name": f"Card {card_id}"}
        fields.update(card_fields)
        return DeckCard(card=Card(id=card_id, **fields), quantity=quantity, category=category)

    return _make


@pytest.fixture
def balanced_deck(make_entry: EntryFactory) -> list[DeckCard]:
    """
    A 50-card deck that passes every rule.

    Costs: 48% low, 36% mid, 16% high. Units: 72%.
    Factions: Zeon 68%, Earth Federation 32%. Level 1: 32%.
    """
    return [
        make_entry("u1", 4, cost=1, level=1, card_type="Unit", faction="Zeon"),
        make_entry("u2", 4, cost=1, level=1, card_type="Unit", faction="Zeon"),
        make_entry("u3", 4, cost=2, level=1, card_type="Unit", faction="Zeon"),
        make_entry("u4", 4, cost=2, level=2, card_type="Unit", faction="Zeon"),
        make_entry("u5", 4, cost=3, level=3, card_type="Unit", faction="Zeon"),
        make_entry("u6", 4, cost=4, level=3, card_type="Unit", faction="Zeon"),
        make_entry("u7", 4, cost=5, level=4, card_type="Unit", faction="Earth Federation"),
        make_entry("u8", 4, cost=6, level=5, card_type="Unit", faction="Earth Federation"),
        make_entry("u9", 4, cost=7, level=6, card_type="Unit", faction="Earth Federation"),
        make_entry("c1", 4, cost=1, level=1, card_type="Command", faction="Zeon"),
        make_entry("c2", 4, cost=2, level=2, card_type="Command", faction="Earth Federation"),
        make_entry("c3", 4, cost=3, level=2, card_type="Command", faction="Zeon"),
        make_entry("p1", 2, cost=4, level=3, card_type="Pilot", faction="Zeon", rarity="Rare"),
    ]


@pytest.fixture
def mono_zeon_deck(make_entry: EntryFactory) -> list[DeckCard]:
    """60 copies, all cost 3, all Zeon units, spread over 15 cards."""
    return [
        make_entry(f"z{i}", 4, cost=3, level=3, card_type="Unit", faction="Zeon")
        for i in range(15)
    ]
