from deckwarden.parsers.deck_json import (
    DeckCardEntry,
    ImportedDeck,
    aggregate_deck_cards,
    parse_deck_json,
)

__all__ = [
    "DeckCardEntry",
    "ImportedDeck",
    "aggregate_deck_cards",
    "parse_deck_json",
]
