from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Card:
    """
    A card record as supplied by the card database.

    Read-only to the validation engine. Every field except identity and
    name may be missing; validators normalize missing values instead of
    rejecting the card.

    Attributes:
        id: Stable card identifier
        name: Display name (e.g., "Char's Zaku II")
        cost: Resource cost to play the card
        level: Card level
        faction: Free-text faction (e.g., "Zeon", "Earth Federation")
        card_type: Card type name (e.g., "Unit", "Command", "Pilot")
        rarity: Rarity name (e.g., "Common", "Secret Legendary")
        hit_points: Unit HP
        attack_points: Unit AP
        clash_points: Clash value
        set_code: Set identifier (e.g., "GD01")
        set_number: Number within the set
    """

    id: str
    name: str
    cost: int | None = None
    level: int | None = None
    faction: str | None = None
    card_type: str | None = None
    rarity: str | None = None
    hit_points: int | None = None
    attack_points: int | None = None
    clash_points: int | None = None
    set_code: str | None = None
    set_number: str | None = None


@dataclass(frozen=True, slots=True)
class DeckCard:
    """
    One deck entry: a card, how many copies, and an optional partition label.

    Callers are expected to aggregate entries per card before validation;
    the engine treats each entry independently.
    """

    card: Card
    quantity: int
    category: str | None = None  # "main", "side", ... (not interpreted)
