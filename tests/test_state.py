"""Tests for cardbattle.state.GameState."""

from conftest import MID, NO_PROC, FixedRandom

from cardbattle.cards import SolarBeam
from cardbattle.config import GameConfig
from cardbattle.context import GameContext
from cardbattle.effects import StatusEffect
from cardbattle.enemy import Enemy
from cardbattle.state import GameState


class TestGameState:
    def test_implements_context(self):
        assert isinstance(GameState(), GameContext)

    def test_from_config(self):
        cfg = GameConfig(player_max_hp=120, player_start_hp=90, enemy_max_hp=60, enemy_start_hp=60)
        state = GameState.from_config(cfg)
        assert state.player_hp == 90
        assert state.player_max_hp == 120
        assert state.enemy_hp == 60

    def test_from_config_with_enemy(self):
        enemy = Enemy(name="Ogre", max_hp=150)
        state = GameState.from_config(GameConfig(), enemy=enemy)
        assert state.enemy is enemy
        assert state.enemy_hp == 150
        assert state.enemy_max_hp == 150

    def test_hp_clamped(self):
        state = GameState()
        state.update_player_hp(500)
        assert state.player_hp == 100
        state.update_player_hp(-20)
        assert state.player_hp == 0

    def test_mana_clamped(self):
        state = GameState()
        state.update_player_mana(-3)
        assert state.player_mana == 0
        state.update_player_mana(99)
        assert state.player_mana == 50

    def test_enemy_hp_syncs(self, enemy):
        state = GameState(enemy=enemy)
        state.update_enemy_hp(30)
        assert enemy.hp == 30
        state.update_enemy_hp(-10)
        assert state.enemy_hp == 0
        assert enemy.is_alive is False

    def test_constructor_takes_enemy_hp(self):
        boss = Enemy(name="Goblin Boss", max_hp=200)
        state = GameState(enemy=boss)
        assert state.enemy_hp == 200
        assert state.enemy_max_hp == 200

    def test_damage_on_large_enemy_stays_in_sync(self):
        boss = Enemy(name="Goblin Boss", max_hp=200)
        state = GameState(enemy=boss)
        SolarBeam(rng=FixedRandom(NO_PROC, MID)).execute_effect(state, boss)
        assert boss.hp == 200 - 14
        assert state.enemy_hp == boss.hp

    def test_wounded_enemy_keeps_hp(self):
        enemy = Enemy(name="Orc", max_hp=60, hp=25)
        state = GameState(enemy=enemy)
        assert state.enemy_hp == 25
        assert state.enemy_max_hp == 60

    def test_effects(self):
        state = GameState()
        state.add_effect(StatusEffect("barkskin", "damage_reduction", 0.4, 3, "BarkSkin"))
        state.add_effect(StatusEffect("barkskin", "damage_reduction", 0.2, 3, "Other"))
        assert state.has_effect("barkskin")
        assert state.remove_effect("barkskin") is True
        assert len(state.active_effects) == 1
        assert state.active_effects[0].source == "Other"
        assert state.remove_effect("thorns") is False

    def test_reset(self, enemy):
        state = GameState(enemy=enemy)
        state.update_player_hp(10)
        state.update_enemy_hp(5)
        state.last_damage_dealt = 9
        state.is_critical_hit = True
        state.add_effect(StatusEffect("thorns", "reflection", 4, 3, "Thorns"))
        state.reset(GameConfig())
        assert state.player_hp == 100
        assert state.enemy_hp == 80
        assert enemy.hp == 80
        assert state.last_damage_dealt == 0
        assert state.is_critical_hit is False
        assert state.active_effects == []
