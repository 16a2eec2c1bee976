"""
Validation dispatcher.

Maps each registry rule id to its validator, runs every rule against a
deck, and assembles the summary. The table is checked against the
registry when this module is imported, so a rule without a validator
fails at load time instead of silently passing.

Everything here is a pure function of its arguments.
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from deckwarden.models.card import DeckCard
from deckwarden.models.validation import (
    DeckValidationSummary,
    RuleRegistryError,
    Severity,
    ValidationResult,
    ValidationRule,
)
from deckwarden.validation import rules
from deckwarden.validation.scoring import calculate_validation_score
from deckwarden.validation.validators import (
    validate_card_limit,
    validate_cost_distribution,
    validate_faction_consistency,
    validate_legendary_limit,
    validate_level_distribution,
    validate_max_deck_size,
    validate_min_deck_size,
    validate_unit_ratio,
)

logger = logging.getLogger(__name__)

Validator = Callable[[ValidationRule, Sequence[DeckCard]], ValidationResult]

VALIDATORS: dict[str, Validator] = {
    rules.DECK_SIZE_MIN: validate_min_deck_size,
    rules.DECK_SIZE_MAX: validate_max_deck_size,
    rules.CARD_LIMIT: validate_card_limit,
    rules.LEGENDARY_LIMIT: validate_legendary_limit,
    rules.COST_DISTRIBUTION: validate_cost_distribution,
    rules.FACTION_CONSISTENCY: validate_faction_consistency,
    rules.UNIT_RATIO: validate_unit_ratio,
    rules.LEVEL_DISTRIBUTION: validate_level_distribution,
}


def verify_dispatch_table(
    registry: Iterable[ValidationRule] = rules.VALIDATION_RULES,
    table: dict[str, Validator] = VALIDATORS,
) -> None:
    """
    Ensure every registered rule id has a validator.

    Raises:
        RuleRegistryError: Listing the ids with no validator
    """
    missing = [rule.id for rule in registry if rule.id not in table]
    if missing:
        raise RuleRegistryError(missing)


def run_rule(rule: ValidationRule, deck: Sequence[DeckCard]) -> ValidationResult:
    """
    Run one rule against a deck.

    A rule id with no validator passes with a neutral message. Registry
    rules cannot hit this path; it only applies to rules built elsewhere.
    """
    validator = VALIDATORS.get(rule.id)
    if validator is None:
        logger.warning("No validator registered for rule %s; treating as passed", rule.id)
        return ValidationResult(rule=rule, is_valid=True, message="Unknown rule")
    return validator(rule, deck)


def run_all_rules(deck: Sequence[DeckCard]) -> list[ValidationResult]:
    """Run every registry rule, returning results in registry order."""
    return [run_rule(rule, deck) for rule in rules.VALIDATION_RULES]


def summarize(results: Sequence[ValidationResult]) -> DeckValidationSummary:
    """
    Partition failing results by severity and score them.

    Args:
        results: One result per evaluated rule

    Returns:
        Summary whose is_valid is True iff no error-severity rule failed
    """
    failing = [result for result in results if not result.is_valid]

    return DeckValidationSummary(
        total_results=len(results),
        errors=tuple(r for r in failing if r.rule.severity == Severity.ERROR),
        warnings=tuple(r for r in failing if r.rule.severity == Severity.WARNING),
        info=tuple(r for r in failing if r.rule.severity == Severity.INFO),
        score=calculate_validation_score(results),
    )


def validate_deck(deck: Iterable[DeckCard]) -> DeckValidationSummary:
    """
    Validate a deck against every registered rule.

    The deck is read once into a tuple and never modified. An empty deck is
    valid input and reports its failures like any other deck.

    Args:
        deck: Deck entries (card, quantity, category)

    Returns:
        Fresh DeckValidationSummary
    """
    entries = tuple(deck)
    results = run_all_rules(entries)
    summary = summarize(results)

    logger.debug(
        "Validated deck: %d entries, %d rules, %d errors, %d warnings, %d info, score %d",
        len(entries),
        summary.total_results,
        len(summary.errors),
        len(summary.warnings),
        len(summary.info),
        summary.score,
    )

    return summary


verify_dispatch_table()
