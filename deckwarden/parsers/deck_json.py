"""
Parser for the JSON deck export format.

Format:
    {
        "name": "Zeon Aggro",
        "cards": [
            {"id": "GD01-001", "name": "Zaku II", "quantity": 4,
             "category": "main", "cost": 2, "level": 2, "type": "Unit",
             "rarity": "Common", "faction": "Zeon", "set": "GD01",
             "setNumber": "001"}
        ]
    }

Entry fields other than id, name and quantity are optional. Card data in
the file is taken as-is; nothing is looked up.
"""

import json
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from deckwarden.models.card import Card, DeckCard
from deckwarden.models.failure import DeckImportError


class DeckCardEntry(BaseModel):
    """One card entry as it appears in deck JSON or an HTTP request."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    category: str | None = None
    cost: int | None = Field(default=None, ge=0)
    level: int | None = Field(default=None, ge=0)
    faction: str | None = None
    card_type: str | None = Field(default=None, alias="type")
    rarity: str | None = None
    hit_points: int | None = Field(default=None, alias="hitPoints")
    attack_points: int | None = Field(default=None, alias="attackPoints")
    clash_points: int | None = Field(default=None, alias="clashPoints")
    set_code: str | None = Field(default=None, alias="set")
    set_number: str | None = Field(default=None, alias="setNumber")

    def to_deck_card(self) -> DeckCard:
        card = Card(
            id=self.id,
            name=self.name,
            cost=self.cost,
            level=self.level,
            faction=self.faction,
            card_type=self.card_type,
            rarity=self.rarity,
            hit_points=self.hit_points,
            attack_points=self.attack_points,
            clash_points=self.clash_points,
            set_code=self.set_code,
            set_number=self.set_number,
        )
        return DeckCard(card=card, quantity=self.quantity, category=self.category)


class DeckDocument(BaseModel):
    """Top-level deck export document."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    description: str | None = None
    cards: list[DeckCardEntry]


@dataclass
class ImportedDeck:
    """A deck read from JSON, ready for validation."""

    name: str
    cards: list[DeckCard] = field(default_factory=list)
    description: str | None = None

    def total_cards(self) -> int:
        return sum(entry.quantity for entry in self.cards)


def parse_deck_json(text: str, max_entries: int | None = None) -> ImportedDeck:
    """
    Parse deck export JSON into deck entries.

    Args:
        text: Raw JSON document
        max_entries: Reject documents with more card entries than this

    Returns:
        ImportedDeck with one DeckCard per entry, in file order

    Raises:
        DeckImportError: Invalid JSON, missing name or cards, bad entries,
            or too many entries
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeckImportError("invalid JSON", detail=str(e)) from e

    if not isinstance(raw, dict):
        raise DeckImportError("expected a JSON object at the top level")

    if not raw.get("name"):
        raise DeckImportError("deck name is required")

    if not isinstance(raw.get("cards"), list):
        raise DeckImportError("cards array is required")

    if max_entries is not None and len(raw["cards"]) > max_entries:
        raise DeckImportError(f"deck has more than {max_entries} card entries")

    try:
        document = DeckDocument.model_validate(raw)
    except ValidationError as e:
        raise DeckImportError("invalid card entry", detail=_first_error(e)) from e

    return ImportedDeck(
        name=document.name,
        description=document.description,
        cards=[entry.to_deck_card() for entry in document.cards],
    )


def aggregate_deck_cards(cards: list[DeckCard]) -> list[DeckCard]:
    """
    Merge entries that share a card id.

    Quantities are summed; the first entry's card record and category win.
    Order follows each card's first appearance.
    """
    merged: dict[str, DeckCard] = {}
    for entry in cards:
        existing = merged.get(entry.card.id)
        if existing is None:
            merged[entry.card.id] = entry
        else:
            merged[entry.card.id] = DeckCard(
                card=existing.card,
                quantity=existing.quantity + entry.quantity,
                category=existing.category,
            )
    return list(merged.values())


def _first_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}"
