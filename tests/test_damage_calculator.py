"""Tests for cardbattle.damage_calculator."""

from types import SimpleNamespace

import pytest

from conftest import ALWAYS_PROC, MID, NO_PROC, FixedRandom

from cardbattle.cards import SolarBeam
from cardbattle.config import GameConfig
from cardbattle.damage_calculator import (
    AttackInfo, DamageCalculator, defense_reduction, elemental_bonus,
)
from cardbattle.enemy import Enemy


def calc(*values):
    return DamageCalculator(rng=FixedRandom(*values), config=GameConfig())


class TestElementalBonus:
    def test_advantage(self):
        assert elemental_bonus("fire", "ice") == 1.5
        assert elemental_bonus("water", "fire") == 1.5

    def test_neutral(self):
        assert elemental_bonus("fire", "water") == 1.0
        assert elemental_bonus("nature", "neutral") == 1.0


class TestDefenseReduction:
    def test_one_percent_per_point(self):
        assert defense_reduction(40) == pytest.approx(0.4)

    def test_penetration_ignores_part_of_defense(self):
        assert defense_reduction(40, penetration=0.5) == pytest.approx(0.2)
        assert defense_reduction(40, penetration=1.0) == 0

    def test_capped(self):
        assert defense_reduction(200) == 0.5
        assert defense_reduction(200, penetration=0.5, cap=0.75) == 0.75

    def test_negative_defense_ignored(self):
        assert defense_reduction(-30) == 0


class TestCalculateDamage:
    def test_full_pipeline(self):
        attacker = SimpleNamespace(name="Flame", damage=10, element="fire")
        defender = SimpleNamespace(name="Yeti", defense=20, element="ice")
        result = calc(MID).calculate_damage(attacker, defender, AttackInfo(is_critical_hit=False))
        assert result.success is True
        assert result.defense_reduced_damage == pytest.approx(8.0)
        assert result.elemental_bonus == 1.5
        assert result.final_damage == 12
        assert result.defense_reduction_pct == pytest.approx(20.0)
        assert result.attacker == "Flame"
        assert result.defender == "Yeti"

    def test_defense_capped(self):
        attacker = SimpleNamespace(damage=10)
        defender = SimpleNamespace(defense=90)
        result = calc(MID).calculate_damage(attacker, defender, AttackInfo(is_critical_hit=False))
        assert result.defense_reduced_damage == pytest.approx(5.0)
        assert result.final_damage == 5

    def test_forced_crit(self):
        attacker = SimpleNamespace(damage=10)
        defender = SimpleNamespace(defense=0)
        result = calc(MID).calculate_damage(attacker, defender, AttackInfo(is_critical_hit=True))
        assert result.is_critical_hit is True
        assert result.final_damage == 15

    def test_custom_crit_multiplier(self):
        attacker = SimpleNamespace(damage=10)
        defender = SimpleNamespace(defense=0)
        info = AttackInfo(is_critical_hit=True, critical_multiplier=2.0)
        assert calc(MID).calculate_damage(attacker, defender, info).final_damage == 20

    def test_rolled_crit(self):
        attacker = SimpleNamespace(damage=10)
        defender = SimpleNamespace(defense=0)
        result = calc(ALWAYS_PROC, MID).calculate_damage(attacker, defender)
        assert result.is_critical_hit is True

    def test_minimum_one(self):
        attacker = SimpleNamespace(damage=0)
        defender = SimpleNamespace(defense=0)
        result = calc(MID).calculate_damage(attacker, defender, AttackInfo(is_critical_hit=False))
        assert result.final_damage == 1

    def test_attack_power_fallback(self):
        attacker = SimpleNamespace(name="Orc", attack_power=7)
        defender = SimpleNamespace(defense=0)
        result = calc(MID).calculate_damage(attacker, defender, AttackInfo(is_critical_hit=False))
        assert result.base_damage == 7

    @pytest.mark.parametrize("attacker,defender", [(None, object()), (object(), None)])
    def test_invalid_inputs(self, attacker, defender):
        result = calc().calculate_damage(attacker, defender)
        assert result.success is False
        assert result.error == "invalid_inputs"

    def test_card_damage(self):
        enemy = Enemy(name="Goblin", max_hp=30)
        result = calc(NO_PROC, MID).calculate_card_damage(SolarBeam(), enemy)
        assert result.final_damage == 14
        assert result.defender == "Goblin"

    def test_does_not_mutate(self):
        enemy = Enemy(name="Goblin", max_hp=30)
        calc(MID).calculate_card_damage(SolarBeam(), enemy)
        assert enemy.hp == 30


class TestCalculateHealing:
    def test_normal(self):
        healer = SimpleNamespace(name="Heal", heal_amount=10)
        result = calc(MID).calculate_healing(healer, is_critical_heal=False)
        assert result.success is True
        assert result.final_heal == 10
        assert result.target == "self"

    def test_critical(self):
        healer = SimpleNamespace(name="Heal", heal_amount=10)
        result = calc(MID).calculate_healing(healer, is_critical_heal=True)
        assert result.final_heal == 15
        assert result.critical_multiplier == 1.5

    def test_explicit_base_and_bonus(self):
        result = calc(MID).calculate_healing(object(), base_heal=8, healing_bonus=1.5,
                                             is_critical_heal=False)
        assert result.final_heal == 12

    def test_no_base(self):
        result = calc().calculate_healing(SimpleNamespace(name="Empty"))
        assert result.success is False
        assert result.error == "no_healing_base"

    def test_no_healer(self):
        assert calc().calculate_healing(None).error == "invalid_healer"


class TestCalculateShield:
    def test_basic(self):
        result = calc().calculate_shield(SimpleNamespace(name="Ward", shield_amount=8))
        assert result.success is True
        assert result.final_shield == 8
        assert result.duration == 3
        assert result.source == "Ward"

    def test_bonus_and_duration(self):
        result = calc().calculate_shield(SimpleNamespace(shield_amount=8), shield_bonus=1.5,
                                         duration=5)
        assert result.final_shield == 12
        assert result.duration == 5

    def test_no_base(self):
        result = calc().calculate_shield(SimpleNamespace(name="Ward"), base_shield=0)
        assert result.error == "no_shield_base"

    def test_no_card(self):
        assert calc().calculate_shield(None).error == "invalid_card"
