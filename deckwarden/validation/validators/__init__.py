from deckwarden.validation.validators.card_limits import (
    validate_card_limit,
    validate_legendary_limit,
)
from deckwarden.validation.validators.cost_distribution import validate_cost_distribution
from deckwarden.validation.validators.deck_size import (
    validate_max_deck_size,
    validate_min_deck_size,
)
from deckwarden.validation.validators.faction_consistency import validate_faction_consistency
from deckwarden.validation.validators.level_distribution import validate_level_distribution
from deckwarden.validation.validators.unit_ratio import validate_unit_ratio

__all__ = [
    "validate_card_limit",
    "validate_cost_distribution",
    "validate_faction_consistency",
    "validate_legendary_limit",
    "validate_level_distribution",
    "validate_max_deck_size",
    "validate_min_deck_size",
    "validate_unit_ratio",
]
