"""Tests for cardbattle.cards.registry."""

import pytest

from cardbattle.cards import (
    BarkSkin, Card, CardRegistry, SolarBeam, create_default_registry, normalize_card_name,
)
from cardbattle.exceptions import CardNotFoundError

ALL_CARDS = [
    "fire_blast", "fireball", "ember", "firestorm", "inferno", "combust",
    "solar_beam", "bark_skin", "thorns", "regrow", "poison", "entangle",
    "ironbark", "seed_bomb", "sap", "photosynthesis",
    "heal", "ice_spike", "mana_spring", "purify", "ice_wall", "hydro_boost", "aqua_blast", "regen",
]

CHANNELED = {
    "firestorm", "inferno", "solar_beam", "bark_skin", "regrow", "ironbark", "sap",
    "photosynthesis", "heal", "mana_spring", "purify", "regen",
}


class TestNormalize:
    @pytest.mark.parametrize("name", ["SolarBeam", "solar_beam", "Solar Beam", " solar-beam "])
    def test_equivalent_names(self, name):
        assert normalize_card_name(name) == "solarbeam"


class TestCardRegistry:
    def test_register_and_create(self):
        registry = CardRegistry()
        registry.register_class(SolarBeam)
        card = registry.create("SolarBeam", damage=20)
        assert isinstance(card, SolarBeam)
        assert card.damage == 20

    def test_create_returns_new_cards(self):
        registry = CardRegistry()
        registry.register_class(BarkSkin)
        assert registry.create("bark_skin") is not registry.create("bark_skin")

    def test_unknown_card(self):
        with pytest.raises(CardNotFoundError) as exc_info:
            CardRegistry().create("meteor")
        assert exc_info.value.card_name == "meteor"

    def test_get_and_has(self):
        registry = CardRegistry()
        registry.register("custom", SolarBeam)
        assert registry.get("CUSTOM") is SolarBeam
        assert registry.get("missing") is None
        assert registry.has("custom")
        assert "custom" in registry
        assert 42 not in registry

    def test_override(self):
        registry = CardRegistry()
        registry.register("card", SolarBeam)
        registry.register("card", BarkSkin)
        assert len(registry) == 1
        assert registry.get("card") is BarkSkin


class TestDefaultRegistry:
    def test_all_cards_registered(self):
        registry = create_default_registry()
        assert registry.names() == ALL_CARDS

    @pytest.mark.parametrize("card_id", ALL_CARDS)
    def test_each_card_constructs(self, card_id):
        card = create_default_registry().create(card_id)
        assert isinstance(card, Card)
        assert card.card_id == card_id
        assert card.cost >= 0
        assert card.emoji
        assert card.effect.description
        assert card.get_display_name().startswith(f"{card.name} [{card.cost} mana]")

    @pytest.mark.parametrize("card_id", ALL_CARDS)
    def test_cast_time(self, card_id):
        card = create_default_registry().create(card_id)
        expected = "channeled" if card_id in CHANNELED else "instant"
        assert card.cast_time == expected
