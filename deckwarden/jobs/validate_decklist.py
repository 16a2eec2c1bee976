"""
Validate a deck JSON export from the command line.

Usage:
    python -m deckwarden.jobs.validate_decklist my_deck.json [--json]

Exit codes: 0 when the deck has no errors, 1 when it has errors,
2 when the file cannot be read or imported.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from deckwarden.config import settings
from deckwarden.models.failure import DeckImportError
from deckwarden.models.validation import DeckValidationSummary
from deckwarden.parsers.deck_json import aggregate_deck_cards, parse_deck_json
from deckwarden.validation import generate_suggestions, overall_assessment, validate_deck

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_IMPORT_FAILED = 2


def run_validation(path: Path, as_json: bool = False) -> int:
    """
    Validate the deck stored at `path` and print the report.

    Returns:
        Process exit code
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Could not read %s: %s", path, e)
        return EXIT_IMPORT_FAILED

    try:
        deck = parse_deck_json(text, max_entries=settings.max_deck_entries)
    except DeckImportError as e:
        logger.error("%s (%s)", e.message, e.detail or "no detail")
        return EXIT_IMPORT_FAILED

    cards = aggregate_deck_cards(deck.cards)
    logger.info("Validating '%s' (%d cards)", deck.name, deck.total_cards())

    summary = validate_deck(cards)

    if as_json:
        payload = summary.to_dict()
        payload["suggestions"] = generate_suggestions(summary)
        print(json.dumps(payload, indent=2))
    else:
        print(format_report(deck.name, summary))

    return EXIT_VALID if summary.is_valid else EXIT_INVALID


def format_report(deck_name: str, summary: DeckValidationSummary) -> str:
    """Plain-text report: verdict line, score, then one line per hint."""
    verdict = "VALID" if summary.is_valid else "INVALID"
    lines = [
        f"{deck_name}: {verdict} (score {summary.score}/100)",
        overall_assessment(summary),
    ]
    lines.extend(f"  {hint}" for hint in generate_suggestions(summary))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Validate a deck JSON export.")
    parser.add_argument("path", type=Path, help="Deck JSON file")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return run_validation(args.path, as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
