"""
火系卡牌测试：烈焰冲击、火球术、余烬、火焰风暴、炼狱、自燃
"""

import math

import pytest

from conftest import ALWAYS_PROC, MID, NO_PROC, FixedRandom

from cardbattle.cards import Combust, Ember, Fireball, FireBlast, Firestorm, Inferno
from cardbattle.enemy import Enemy
from cardbattle.exceptions import InvalidCardError
from cardbattle.state import GameState


class TestFireBlast:
    def test_normal_hit(self, state, enemy):
        result = FireBlast(rng=FixedRandom(NO_PROC)).execute_effect(state, enemy)
        assert result.success is True
        assert result.damage == 10
        assert result.is_critical_hit is False
        assert state.enemy_hp == 70
        assert state.last_damage_dealt == 10

    def test_critical_hit(self, state, enemy):
        result = FireBlast(rng=FixedRandom(ALWAYS_PROC)).execute_effect(state, enemy)
        assert result.damage == 15
        assert result.is_critical_hit is True
        assert state.is_critical_hit is True

    def test_no_target(self, state):
        result = FireBlast().execute_effect(state, None)
        assert result.reason == "no_target"
        assert state.enemy_hp == 80

    def test_display(self):
        card = FireBlast()
        assert card.get_display_name() == "Fire Blast [5 mana] 🔥"
        assert card.element == "fire"

    def test_negative_damage(self):
        with pytest.raises(InvalidCardError):
            FireBlast(damage=-5)


class TestFireball:
    def test_hit_without_burn(self, state, enemy):
        result = Fireball(rng=FixedRandom(NO_PROC, NO_PROC)).execute_effect(state, enemy)
        assert result.damage == 8
        assert result.details["burn_applied"] is False
        assert enemy.active_effects == []

    def test_hit_with_burn(self, state, enemy):
        result = Fireball(rng=FixedRandom(NO_PROC, ALWAYS_PROC)).execute_effect(state, enemy)
        assert result.details["burn_applied"] is True
        burn = enemy.get_effect("burn")
        assert burn.effect_type == "burn"
        assert burn.magnitude == 2
        assert burn.turns_remaining == 2
        assert result.status_effects == [burn]

    def test_crit_and_burn(self, state, enemy):
        result = Fireball(rng=FixedRandom(ALWAYS_PROC)).execute_effect(state, enemy)
        assert result.damage == 12
        assert result.is_critical_hit is True
        assert enemy.has_effect("burn")

    def test_burn_without_holder_not_reported(self):
        state = GameState()
        result = Fireball(rng=FixedRandom(NO_PROC, ALWAYS_PROC)).execute_effect(state, "enemy")
        assert result.success is True
        assert result.status_effects == []
        assert result.details["burn_applied"] is False

    def test_no_target(self, state):
        assert Fireball().execute_effect(state, None).reason == "no_target"


class TestEmber:
    def test_initial_damage_and_burn(self, state, enemy):
        result = Ember(rng=FixedRandom(MID)).execute_effect(state, enemy)
        assert result.damage == math.floor(3 * (0.9 + 0.5 * 0.2))
        burn = enemy.get_effect("ember_burn")
        assert burn.stacks == 1
        assert burn.magnitude == 3
        assert burn.turns_remaining == 3
        assert result.details["stacks"] == 1

    def test_stacks_on_enemy(self, state, enemy):
        card = Ember(rng=FixedRandom(MID))
        card.execute_effect(state, enemy)
        card.execute_effect(state, enemy)
        burns = [e for e in enemy.active_effects if e.name == "ember_burn"]
        assert len(burns) == 1
        assert burns[0].stacks == 2

    def test_stack_refreshes_duration(self, state, enemy):
        card = Ember(rng=FixedRandom(MID))
        card.execute_effect(state, enemy)
        enemy.get_effect("ember_burn").turns_remaining = 1
        card.execute_effect(state, enemy)
        assert enemy.get_effect("ember_burn").turns_remaining == 3

    def test_max_stacks(self, state, enemy):
        card = Ember(rng=FixedRandom(MID))
        for _ in range(7):
            card.execute_effect(state, enemy)
        assert enemy.get_effect("ember_burn").stacks == 5

    def test_no_target(self, state):
        assert Ember().execute_effect(state, None).reason == "no_target"

    def test_stacks_on_target_without_state_enemy(self):
        state = GameState()
        slime = Enemy(name="Slime", max_hp=40)
        card = Ember(rng=FixedRandom(MID))
        card.execute_effect(state, slime)
        result = card.execute_effect(state, slime)
        assert slime.get_effect("ember_burn").stacks == 2
        assert result.details["stacks"] == 2

    def test_nothing_to_hold_burn(self):
        state = GameState()
        result = Ember(rng=FixedRandom(MID)).execute_effect(state, "enemy")
        assert result.status_effects == []
        assert result.details["stacks"] == 0
        assert result.details["total_expected_damage"] == result.damage


class TestFirestorm:
    def test_hits_and_total(self, state, enemy):
        # 0.5 -> 4 段，每段 floor(4 * 1.5) = 6，不暴击
        result = Firestorm(rng=FixedRandom(MID)).execute_effect(state, enemy)
        assert result.success is True
        assert result.details["number_of_hits"] == 4
        assert result.details["hit_damages"] == [6, 6, 6, 6]
        assert result.damage == 24
        assert result.is_critical_hit is False
        assert state.enemy_hp == 56
        assert state.last_damage_dealt == 24

    def test_minimum_hits(self, state, enemy):
        result = Firestorm(rng=FixedRandom(0.0, NO_PROC)).execute_effect(state, enemy)
        assert result.details["hit_damages"] == [7, 7, 7]
        assert result.details["critical_hits"] == 0

    def test_every_hit_crits(self, state, enemy):
        result = Firestorm(rng=FixedRandom(NO_PROC, ALWAYS_PROC)).execute_effect(state, enemy)
        assert result.details["number_of_hits"] == 5
        assert result.details["hit_damages"] == [6] * 5
        assert result.details["critical_hits"] == 5
        assert result.is_critical_hit is True
        assert state.is_critical_hit is True

    def test_stops_when_enemy_falls(self):
        imp = Enemy(name="Imp", max_hp=10)
        state = GameState(enemy=imp)
        result = Firestorm(rng=FixedRandom(MID)).execute_effect(state, imp)
        assert result.details["hit_damages"] == [6, 6]
        assert imp.hp == 0
        assert imp.is_alive is False

    def test_needs_enough_enemy_hp(self, state):
        card = Firestorm()
        card.update_state(is_in_hand=True)
        assert card.can_play(state) is True
        assert card.can_play(GameState(enemy_hp=11)) is False

    def test_stats(self):
        card = Firestorm()
        assert card.get_stats_string() == "Hits: 3-5 | DMG: 12-40"
        assert card.cast_time == "channeled"


class TestInferno:
    def test_normal_hit(self, state, enemy):
        result = Inferno(rng=FixedRandom(NO_PROC, MID)).execute_effect(state, enemy)
        assert result.damage == 18
        assert result.details["defense_penetrated"] == 0
        assert state.enemy_hp == 62

    def test_critical_hit_doubles(self, state, enemy):
        result = Inferno(rng=FixedRandom(ALWAYS_PROC, MID)).execute_effect(state, enemy)
        assert result.damage == 36
        assert result.is_critical_hit is True

    def test_ignores_half_of_defense(self):
        golem = Enemy(name="Golem", max_hp=100, defense=40)
        state = GameState(enemy=golem)
        result = Inferno(rng=FixedRandom(NO_PROC, MID)).execute_effect(state, golem)
        # 40 防御只计一半：减伤 20%
        assert result.damage == 14
        assert result.details["defense_penetrated"] == 20
        assert golem.hp == 86

    def test_needs_enemy_above_five(self):
        card = Inferno()
        card.update_state(is_in_hand=True)
        assert card.can_play(GameState(enemy_hp=6)) is True
        assert card.can_play(GameState(enemy_hp=5)) is False


class TestCombust:
    def test_normal_hit(self, state, enemy):
        result = Combust(rng=FixedRandom(MID)).execute_effect(state, enemy)
        assert result.damage == 12
        assert result.details["is_execute"] is False
        assert result.details["is_kill"] is False
        assert result.details["mana_refund_amount"] == 0

    def test_execute_doubles_damage(self):
        orc = Enemy(name="Orc", max_hp=100, hp=30)
        state = GameState(enemy=orc)
        result = Combust(rng=FixedRandom(MID)).execute_effect(state, orc)
        assert result.details["is_execute"] is True
        assert result.damage == 24
        assert orc.hp == 6

    def test_kill_refunds_mana(self):
        orc = Enemy(name="Orc", max_hp=100, hp=20)
        state = GameState(player_mana=10, enemy=orc)
        card = Combust(rng=FixedRandom(MID))
        card.update_state(is_in_hand=True)

        result = card.play(state, orc)

        assert result.details["is_kill"] is True
        assert result.details["mana_refunded"] is True
        assert result.details["mana_refund_amount"] == 2
        assert state.player_mana == 10 - 3 + 2
        assert orc.is_alive is False

    def test_cannot_target_dead_enemy(self):
        card = Combust()
        card.update_state(is_in_hand=True)
        assert card.can_play(GameState(enemy_hp=0)) is False

    def test_no_target(self, state):
        assert Combust().execute_effect(state, None).reason == "no_target"
