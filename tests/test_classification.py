"""Tests for card classification helpers."""

import pytest

from deckwarden.models.card import Card
from deckwarden.validation.classification import (
    in_range,
    is_legendary,
    is_unit_type,
    percentage,
    total_copies,
)


class TestIsLegendary:
    @pytest.mark.parametrize("rarity", ["Legendary", "Secret Legendary", "LEGENDARY RARE"])
    def test_matches_substring_any_case(self, rarity: str) -> None:
        assert is_legendary(Card(id="a", name="A", rarity=rarity))

    @pytest.mark.parametrize("rarity", [None, "", "Rare", "Legend"])
    def test_rejects_others(self, rarity: str | None) -> None:
        assert not is_legendary(Card(id="a", name="A", rarity=rarity))


class TestIsUnitType:
    @pytest.mark.parametrize("card_type", ["Unit", "unit", "Unit Token"])
    def test_matches_substring_any_case(self, card_type: str) -> None:
        assert is_unit_type(Card(id="a", name="A", card_type=card_type))

    @pytest.mark.parametrize("card_type", [None, "Command", "Pilot", "Base"])
    def test_rejects_others(self, card_type: str | None) -> None:
        assert not is_unit_type(Card(id="a", name="A", card_type=card_type))


class TestArithmetic:
    def test_percentage_of_zero_total_is_zero(self) -> None:
        assert percentage(0, 0) == 0.0
        assert percentage(5, 0) == 0.0

    def test_percentage(self) -> None:
        assert percentage(1, 4) == 25.0

    def test_in_range_inclusive(self) -> None:
        assert in_range(30.0, (30.0, 50.0))
        assert in_range(50.0, (30.0, 50.0))
        assert not in_range(50.1, (30.0, 50.0))

    def test_total_copies(self, make_entry) -> None:
        assert total_copies([make_entry("a", 3), make_entry("b", 4)]) == 7
        assert total_copies([]) == 0
