"""
Tests for deck validation end to end.

Covers the public entry point, the concrete deck scenarios, and the
guarantees that validation is deterministic and read-only.
"""

import logging

from deckwarden.models.card import DeckCard
from deckwarden.models.validation import RuleCategory, Severity, ValidationRule
from deckwarden.validation import VALIDATION_RULES, run_all_rules, run_rule, validate_deck


def _failing_ids(summary) -> set[str]:
    return {result.rule.id for result in summary.failing_results()}


class TestValidateDeck:
    def test_balanced_deck_is_perfect(self, balanced_deck: list[DeckCard]) -> None:
        summary = validate_deck(balanced_deck)

        assert summary.is_valid
        assert summary.total_results == len(VALIDATION_RULES)
        assert summary.errors == ()
        assert summary.warnings == ()
        assert summary.info == ()
        assert summary.score == 100

    def test_mono_zeon_scenario(self, mono_zeon_deck: list[DeckCard]) -> None:
        """60 copies at cost 3, all Zeon units."""
        results = {result.rule.id: result for result in run_all_rules(mono_zeon_deck)}

        assert not results["cost-distribution"].is_valid
        assert results["faction-consistency"].is_valid
        assert results["deck-size-min"].is_valid
        assert results["deck-size-max"].is_valid

    def test_mono_zeon_unit_ratio_above_range(self, mono_zeon_deck: list[DeckCard]) -> None:
        # 100% units is outside the 60-80% band
        results = {result.rule.id: result for result in run_all_rules(mono_zeon_deck)}

        assert not results["unit-ratio"].is_valid

    def test_legendary_scenario(self, balanced_deck: list[DeckCard], make_entry) -> None:
        deck = [
            *balanced_deck[:-1],
            make_entry(
                "GD01-100",
                2,
                name="Char's Zaku II",
                rarity="Secret Legendary",
                cost=4,
                level=3,
                card_type="Pilot",
                faction="Zeon",
            ),
        ]
        summary = validate_deck(deck)

        assert not summary.is_valid
        assert [r.rule.id for r in summary.errors] == ["legendary-limit"]
        assert summary.errors[0].affected_cards == ("GD01-100",)
        assert summary.score == 75

    def test_copy_limit_scenario(self, make_entry) -> None:
        summary = validate_deck([make_entry("a", 5, name="Zaku II")])
        card_limit = next(r for r in summary.errors if r.rule.id == "card-limit")

        assert card_limit.details is not None
        assert "Zaku II (5 copies)" in card_limit.details

    def test_empty_deck(self) -> None:
        """An empty deck fails on size without raising."""
        summary = validate_deck([])

        assert not summary.is_valid
        assert [r.rule.id for r in summary.errors] == ["deck-size-min"]
        assert summary.score < 100
        assert _failing_ids(summary) == {
            "deck-size-min",
            "cost-distribution",
            "unit-ratio",
            "level-distribution",
        }
        assert summary.score == 55

    def test_results_partitioned_in_registry_order(self, make_entry) -> None:
        deck = [make_entry("a", 70, rarity="Legendary")]
        summary = validate_deck(deck)

        assert [r.rule.id for r in summary.errors] == ["card-limit", "legendary-limit"]
        assert [r.rule.id for r in summary.warnings] == ["deck-size-max", "level-distribution"]
        assert all(r.rule.severity == Severity.INFO for r in summary.info)

    def test_small_deck_is_invalid_regardless_of_balance(self, balanced_deck) -> None:
        summary = validate_deck(balanced_deck[:5])

        assert not summary.is_valid
        assert "deck-size-min" in _failing_ids(summary)

    def test_accepts_any_iterable(self, balanced_deck: list[DeckCard]) -> None:
        assert validate_deck(iter(balanced_deck)) == validate_deck(balanced_deck)


class TestPurity:
    def test_idempotent(self, mono_zeon_deck: list[DeckCard]) -> None:
        first = validate_deck(mono_zeon_deck)
        second = validate_deck(mono_zeon_deck)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_deck_not_mutated(self, balanced_deck: list[DeckCard]) -> None:
        snapshot = list(balanced_deck)

        validate_deck(balanced_deck)

        assert balanced_deck == snapshot

    def test_fresh_summary_each_call(self, balanced_deck: list[DeckCard]) -> None:
        assert validate_deck(balanced_deck) is not validate_deck(balanced_deck)


class TestRunRule:
    def test_unknown_rule_passes_with_neutral_message(self, caplog) -> None:
        rule = ValidationRule(
            id="tournament-banlist",
            name="Banlist",
            description="Checked elsewhere",
            category=RuleCategory.LEGALITY,
            severity=Severity.ERROR,
        )

        with caplog.at_level(logging.WARNING, logger="deckwarden.validation.dispatcher"):
            result = run_rule(rule, [])

        assert result.is_valid
        assert result.message == "Unknown rule"
        assert result.rule is rule
        assert "tournament-banlist" in caplog.text

    def test_run_all_rules_order(self, balanced_deck: list[DeckCard]) -> None:
        results = run_all_rules(balanced_deck)

        assert [r.rule for r in results] == list(VALIDATION_RULES)
