from deckwarden.api.health import router as health_router
from deckwarden.api.validation import router as validation_router

__all__ = [
    "health_router",
    "validation_router",
]
