"""
树皮术与荆棘测试
自身增益卡牌：状态效果施加、不可叠加、无状态软失败
"""

import pytest

from cardbattle.cards import BarkSkin, Thorns
from cardbattle.effects import StatusEffect, StatusEffectType
from cardbattle.events import EventType
from cardbattle.exceptions import InvalidCardError


class TestBarkSkin:
    def test_defaults(self):
        card = BarkSkin()
        assert card.cost == 4
        assert card.damage_reduction == 0.40
        assert card.duration == 3
        assert card.emoji == "🪵"
        assert card.spell_type == "defensive"
        assert card.effect.type == "buff"
        assert card.effect.target == "self"
        assert card.cast_time == "channeled"

    def test_applies_status_effect(self, state):
        card = BarkSkin(damage_reduction=0.40)
        result = card.execute_effect(state)

        assert result.success is True
        assert len(state.active_effects) == 1
        effect = state.active_effects[0]
        assert effect.name == "barkskin"
        assert effect.effect_type == "damage_reduction"
        assert effect.effect_type == StatusEffectType.DAMAGE_REDUCTION
        assert effect.magnitude == 0.40
        assert effect.duration == 3
        assert effect.turns_remaining == 3
        assert effect.source == "BarkSkin"
        assert effect.emoji == "🪵"
        assert effect.to_dict()["damage_reduction"] == 0.40

    def test_result_details(self, state):
        result = BarkSkin().execute_effect(state)
        assert result.details["buff_applied"] is True
        assert result.details["damage_reduction"] == 0.40
        assert result.details["duration"] == 3
        assert result.details["spell_type"] == "defensive"
        assert result.status_effects[0].name == "barkskin"
        assert "40%" in result.message

    def test_no_state_soft_failure(self):
        result = BarkSkin().execute_effect(None)
        assert result.success is False
        assert result.reason == "no_game_state"

    def test_cannot_stack(self, state):
        card = BarkSkin()
        card.update_state(is_in_hand=True)
        assert card.can_play(state) is True
        card.execute_effect(state)
        assert card.can_play(state) is False

    def test_cannot_play_with_foreign_barkskin(self, state):
        state.add_effect(StatusEffect("barkskin", "damage_reduction", 0.2, 1, "Other"))
        card = BarkSkin()
        card.update_state(is_in_hand=True)
        assert card.can_play(state) is False

    def test_other_effects_do_not_block(self, state):
        state.add_effect(StatusEffect("thorns", "reflection", 4, 3, "Thorns"))
        card = BarkSkin()
        card.update_state(is_in_hand=True)
        assert card.can_play(state) is True

    def test_play_rejected_when_active(self, state):
        card = BarkSkin()
        card.update_state(is_in_hand=True)
        card.play(state)
        mana_after_first = state.player_mana
        result = card.play(state)
        assert result.reason == "invalid_conditions"
        assert state.player_mana == mana_after_first
        assert len(state.active_effects) == 1

    def test_status_event(self, state, bus):
        BarkSkin(event_bus=bus).execute_effect(state)
        applied = [e for e in bus.get_history(20) if e.event_type == EventType.STATUS_APPLIED]
        assert applied[0].data["target"] == "player"

    def test_display(self):
        card = BarkSkin()
        assert card.get_display_name() == "BarkSkin [4 mana] 🪵"
        assert card.get_stats_string() == "-40% DMG | 3 turns"

    def test_negative_reduction_raises(self):
        with pytest.raises(InvalidCardError):
            BarkSkin(damage_reduction=-0.1)


class TestThorns:
    def test_applies_reflection(self, state):
        result = Thorns().execute_effect(state)
        assert result.success is True
        effect = state.active_effects[0]
        assert effect.name == "thorns"
        assert effect.effect_type == "reflection"
        assert effect.magnitude == 4
        assert effect.turns_remaining == 3
        assert result.details["reflect_damage"] == 4

    def test_cannot_stack(self, state):
        card = Thorns()
        card.update_state(is_in_hand=True)
        card.execute_effect(state)
        assert card.can_play(state) is False

    def test_no_state(self):
        assert Thorns().execute_effect(None).reason == "no_game_state"

    def test_stats(self):
        assert Thorns().get_stats_string() == "Reflect: 4 | 3 turns"
