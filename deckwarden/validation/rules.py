"""
Rule registry.

The fixed, ordered catalog of validation rules. Adding or removing a rule
is a code change: every id here must have a validator in
`deckwarden.validation.dispatcher.VALIDATORS`, which is checked at import.
"""

from deckwarden.models.validation import RuleCategory, Severity, ValidationRule

DECK_SIZE_MIN = "deck-size-min"
DECK_SIZE_MAX = "deck-size-max"
CARD_LIMIT = "card-limit"
LEGENDARY_LIMIT = "legendary-limit"
COST_DISTRIBUTION = "cost-distribution"
FACTION_CONSISTENCY = "faction-consistency"
UNIT_RATIO = "unit-ratio"
LEVEL_DISTRIBUTION = "level-distribution"

VALIDATION_RULES: tuple[ValidationRule, ...] = (
    ValidationRule(
        id=DECK_SIZE_MIN,
        name="Minimum Deck Size",
        description="Deck must contain at least 50 cards",
        category=RuleCategory.STRUCTURE,
        severity=Severity.ERROR,
    ),
    ValidationRule(
        id=DECK_SIZE_MAX,
        name="Maximum Deck Size",
        description="Deck should not exceed 60 cards for optimal play",
        category=RuleCategory.STRUCTURE,
        severity=Severity.WARNING,
    ),
    ValidationRule(
        id=CARD_LIMIT,
        name="Card Copy Limit",
        description="Maximum 4 copies of any single card",
        category=RuleCategory.CONTENT,
        severity=Severity.ERROR,
    ),
    ValidationRule(
        id=LEGENDARY_LIMIT,
        name="Legendary Card Limit",
        description="Maximum 1 copy of legendary cards",
        category=RuleCategory.CONTENT,
        severity=Severity.ERROR,
    ),
    ValidationRule(
        id=COST_DISTRIBUTION,
        name="Cost Curve Distribution",
        description="Deck should have a balanced cost curve",
        category=RuleCategory.BALANCE,
        severity=Severity.INFO,
    ),
    ValidationRule(
        id=FACTION_CONSISTENCY,
        name="Faction Consistency",
        description="Consider focusing on 1-2 main factions for synergy",
        category=RuleCategory.BALANCE,
        severity=Severity.INFO,
    ),
    ValidationRule(
        id=UNIT_RATIO,
        name="Unit to Non-Unit Ratio",
        description="Recommended 60-80% units, 20-40% support cards",
        category=RuleCategory.BALANCE,
        severity=Severity.INFO,
    ),
    ValidationRule(
        id=LEVEL_DISTRIBUTION,
        name="Level Distribution",
        description="Deck should have cards across multiple levels",
        category=RuleCategory.BALANCE,
        severity=Severity.WARNING,
    ),
)

_RULES_BY_ID: dict[str, ValidationRule] = {rule.id: rule for rule in VALIDATION_RULES}


def get_rule(rule_id: str) -> ValidationRule:
    """
    Look up a registered rule by id.

    Raises:
        KeyError: If no rule with that id is registered
    """
    return _RULES_BY_ID[rule_id]


def rules_by_category(category: RuleCategory) -> list[ValidationRule]:
    """Registered rules in one category, in registry order."""
    return [rule for rule in VALIDATION_RULES if rule.category == category]
