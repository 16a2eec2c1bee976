from deckwarden.validation.classification import is_legendary, is_unit_type
from deckwarden.validation.dispatcher import (
    VALIDATORS,
    run_all_rules,
    run_rule,
    summarize,
    validate_deck,
    verify_dispatch_table,
)
from deckwarden.validation.rules import VALIDATION_RULES, get_rule, rules_by_category
from deckwarden.validation.scoring import SEVERITY_PENALTIES, calculate_validation_score
from deckwarden.validation.suggestions import (
    generate_suggestions,
    overall_assessment,
    suggestions,
)

__all__ = [
    "SEVERITY_PENALTIES",
    "VALIDATION_RULES",
    "VALIDATORS",
    "calculate_validation_score",
    "generate_suggestions",
    "get_rule",
    "is_legendary",
    "is_unit_type",
    "overall_assessment",
    "rules_by_category",
    "run_all_rules",
    "run_rule",
    "suggestions",
    "summarize",
    "validate_deck",
    "verify_dispatch_table",
]
