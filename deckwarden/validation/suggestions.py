"""
Suggestion generation.

Turns a completed validation summary into short remediation hints. Works
only from the summary; the deck itself is never consulted.
"""

from deckwarden.models.validation import DeckValidationSummary, ValidationResult

# Score bands for the overall verdict, highest first
ASSESSMENT_BANDS: tuple[tuple[int, str], ...] = (
    (90, "Excellent deck structure! Your deck follows all major rules."),
    (70, "Good deck structure with room for minor improvements."),
    (50, "Deck needs some adjustments to improve consistency."),
)
NEEDS_WORK = "Deck needs significant improvements to meet tournament standards."


def generate_suggestions(summary: DeckValidationSummary) -> list[str]:
    """
    One hint per failing result, errors first, then warnings, then info.

    Args:
        summary: Output of validate_deck

    Returns:
        Ordered hint strings. Empty when nothing failed.
    """
    return [_suggestion_for(result) for result in summary.failing_results()]


def overall_assessment(summary: DeckValidationSummary) -> str:
    """One-line verdict for the summary's score band."""
    for floor, verdict in ASSESSMENT_BANDS:
        if summary.score >= floor:
            return verdict
    return NEEDS_WORK


def _suggestion_for(result: ValidationResult) -> str:
    hint = result.details or result.message
    return f"[{result.rule.severity.value}] {hint}"


# Short alias matching the public entry point name
suggestions = generate_suggestions
