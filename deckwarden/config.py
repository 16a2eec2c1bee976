from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKWARDEN_")

    app_name: str = "DeckWarden"
    debug: bool = False

    log_level: str = "INFO"

    # Upper bound on distinct deck entries accepted from HTTP or files
    max_deck_entries: int = 500


settings = Settings()


# =============================================================================
# DECK STRUCTURE LIMITS
# =============================================================================

MIN_DECK_SIZE = 50
MAX_DECK_SIZE = 60

MAX_COPIES_PER_CARD = 4
MAX_LEGENDARY_COPIES = 1


# =============================================================================
# BALANCE THRESHOLDS
# =============================================================================
#
# Percentages of total copies in the deck. Ranges are inclusive on both ends.

# Cost buckets: low 0-2, mid 3-5, high 6+
LOW_COST_MAX = 2
MID_COST_MAX = 5

LOW_COST_RANGE = (30.0, 50.0)
MID_COST_RANGE = (20.0, 50.0)
HIGH_COST_RANGE = (5.0, 30.0)

DEFAULT_FACTION = "Neutral"
PRIMARY_FACTION_THRESHOLD = 20.0
MAX_PRIMARY_FACTIONS = 2
DOMINANT_FACTION_THRESHOLD = 60.0

UNIT_RATIO_RANGE = (60.0, 80.0)

# Early-game share: the first of these levels the deck holds any copies of
MIN_DISTINCT_LEVELS = 3
EARLY_LEVELS = (0, 1)
MIN_LOW_LEVEL_PERCENT = 30.0
