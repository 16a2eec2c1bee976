"""
Validation scoring.

Every failing result takes a severity-weighted penalty off a starting
score of 100. The total is clamped to [0, 100], so a deck with no
failing rules always scores exactly 100.
"""

from collections.abc import Iterable

from deckwarden.models.validation import Severity, ValidationResult

MAX_SCORE = 100
MIN_SCORE = 0

# error > warning > info
SEVERITY_PENALTIES: dict[Severity, int] = {
    Severity.ERROR: 25,
    Severity.WARNING: 10,
    Severity.INFO: 5,
}


def calculate_validation_score(results: Iterable[ValidationResult]) -> int:
    """
    Reduce rule results to a composite score.

    Args:
        results: Results for every rule that was evaluated

    Returns:
        Score from 0 to 100
    """
    score = MAX_SCORE
    for result in results:
        if not result.is_valid:
            score -= SEVERITY_PENALTIES[result.rule.severity]
    return max(MIN_SCORE, min(MAX_SCORE, score))
