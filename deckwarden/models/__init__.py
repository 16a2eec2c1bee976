from deckwarden.models.card import Card, DeckCard
from deckwarden.models.failure import (
    STANDARD_MESSAGES,
    STANDARD_SUGGESTIONS,
    ApiResponse,
    DeckImportError,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
    create_unknown_failure,
    finalize_response,
)
from deckwarden.models.validation import (
    DeckValidationSummary,
    RuleCategory,
    RuleRegistryError,
    Severity,
    ValidationResult,
    ValidationRule,
)

__all__ = [
    "ApiResponse",
    "Card",
    "DeckCard",
    "DeckImportError",
    "DeckValidationSummary",
    "FailureDetail",
    "FailureKind",
    "KnownError",
    "OutcomeType",
    "RuleCategory",
    "RuleRegistryError",
    "STANDARD_MESSAGES",
    "STANDARD_SUGGESTIONS",
    "Severity",
    "ValidationResult",
    "ValidationRule",
    "create_unknown_failure",
    "finalize_response",
]
