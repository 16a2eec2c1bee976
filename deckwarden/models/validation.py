"""
Deck validation result types.

A ValidationRule is a static descriptor from the fixed rule registry.
Running one rule against one deck produces a ValidationResult; running
the whole registry produces a DeckValidationSummary.

Summaries are created fresh on every call and carry no identity. Validity
is derived from the error bucket and never stored on its own.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class RuleCategory(str, Enum):
    """Area of deck construction a rule inspects."""

    STRUCTURE = "structure"
    CONTENT = "content"
    BALANCE = "balance"
    LEGALITY = "legality"


class Severity(str, Enum):
    """How much a failing rule matters."""

    ERROR = "error"  # Blocks validity
    WARNING = "warning"  # Flagged, non-blocking
    INFO = "info"  # Advisory only


@dataclass(frozen=True, slots=True)
class ValidationRule:
    """
    Static descriptor for one validation rule.

    Attributes:
        id: Stable string key (e.g., "deck-size-min")
        name: Human-readable rule name
        description: What the rule checks
        category: Area of deck construction
        severity: Bucket a failing result lands in
    """

    id: str
    name: str
    description: str
    category: RuleCategory
    severity: Severity

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "severity": self.severity.value,
        }


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """
    Outcome of running one rule against one deck.

    Attributes:
        rule: The rule that produced this result
        is_valid: Whether the deck satisfies the rule
        message: Short summary
        details: Longer explanation or remediation hint (failures only)
        affected_cards: Ids of the cards responsible for the failure
    """

    rule: ValidationRule
    is_valid: bool
    message: str
    details: str | None = None
    affected_cards: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "rule": self.rule.to_dict(),
            "isValid": self.is_valid,
            "message": self.message,
        }
        if self.details is not None:
            data["details"] = self.details
        if self.affected_cards:
            data["affectedCards"] = list(self.affected_cards)
        return data


@dataclass(frozen=True)
class DeckValidationSummary:
    """
    Full validation report for one deck.

    Only failing results are kept, partitioned by severity.

    Attributes:
        total_results: Number of rules evaluated
        errors: Failing error-severity results, in registry order
        warnings: Failing warning-severity results, in registry order
        info: Failing info-severity results, in registry order
        score: Composite score from 0 to 100
    """

    total_results: int
    errors: tuple[ValidationResult, ...] = field(default_factory=tuple)
    warnings: tuple[ValidationResult, ...] = field(default_factory=tuple)
    info: tuple[ValidationResult, ...] = field(default_factory=tuple)
    score: int = 100

    @property
    def is_valid(self) -> bool:
        """True when no error-severity rule failed."""
        return not self.errors

    def failing_results(self) -> tuple[ValidationResult, ...]:
        """All failing results, errors first, then warnings, then info."""
        return self.errors + self.warnings + self.info

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping using the public camelCase contract keys."""
        return {
            "isValid": self.is_valid,
            "totalResults": self.total_results,
            "errors": [r.to_dict() for r in self.errors],
            "warnings": [r.to_dict() for r in self.warnings],
            "info": [r.to_dict() for r in self.info],
            "score": self.score,
        }


class RuleRegistryError(Exception):
    """
    Raised when the rule registry and the validator table disagree.

    This is a configuration fault caught at import time, never a
    property of the deck being validated.
    """

    def __init__(self, missing_ids: list[str]):
        self.missing_ids = missing_ids
        super().__init__(f"No validator registered for rule(s): {', '.join(missing_ids)}")
