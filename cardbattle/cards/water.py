"""水系卡牌
治疗术、冰刺、法力泉、净化、冰墙、水爆、激流增幅、回春
"""

from __future__ import annotations

import logging
import math

from i18n import t as _t

from ..config import get_config
from ..damage_calculator import DamageCalculator, defense_reduction
from ..effects.status import StatusEffect, StatusEffectType
from ..events import EventType
from ..exceptions import raise_if_negative
from ..rng import roll, variation
from .base import EffectDescriptor, ElementalCard, ExecutionResult, ResultReason

logger = logging.getLogger(__name__)


class Heal(ElementalCard):
    """治疗术：可暴击的治疗"""

    card_id = "heal"

    def __init__(self, name: str = "Heal", cost: int = 3, heal_amount: int = 10, **kwargs):
        raise_if_negative(name, "heal_amount", heal_amount)
        self.heal_amount = heal_amount
        self.crit_chance = 0.10
        self.crit_multiplier = 1.5
        effect = EffectDescriptor(
            type="heal",
            target="self",
            value=heal_amount,
            description=_t(
                "heal.desc", heal=heal_amount,
                crit_chance=f"{self.crit_chance:.0%}", crit_multiplier=self.crit_multiplier,
            ),
            params={"crit_chance": self.crit_chance, "crit_multiplier": self.crit_multiplier},
        )
        super().__init__(
            name, cost, effect, "💚",
            element="water", spell_type="healing", cast_time="channeled",
            **kwargs,
        )

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        return game_state.player_hp < game_state.player_max_hp

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)
        if game_state.player_hp >= game_state.player_max_hp:
            return self._fail(ResultReason.FULL_HEALTH)

        # 治疗暴击不写入 is_critical_hit（该字段只记录伤害暴击）
        is_crit_heal = roll(self.rng, self.crit_chance)
        heal = math.floor(self.heal_amount * self.crit_multiplier) if is_crit_heal else self.heal_amount
        heal = math.floor(heal * variation(self.rng, 0.9, 0.2))
        self._heal_player(game_state, heal)

        key = "heal.applied_crit" if is_crit_heal else "heal.applied"
        return self._succeed(
            _t(key, heal=heal),
            healing=heal,
            details={
                "is_critical_heal": is_crit_heal,
                "base_heal": self.heal_amount,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"Heal: {self.heal_amount} | Crit: {self.crit_chance:.0%}"


class IceSpike(ElementalCard):
    """冰刺：低消耗、高暴击率"""

    card_id = "ice_spike"

    def __init__(self, name: str = "IceSpike", cost: int = 2, damage: int = 6, **kwargs):
        raise_if_negative(name, "damage", damage)
        self.damage = damage
        self.crit_chance = 0.25
        self.crit_multiplier = 1.5
        effect = EffectDescriptor(
            type="damage",
            target="enemy",
            value=damage,
            description=_t("ice_spike.desc", damage=damage, crit_chance=f"{self.crit_chance:.0%}"),
            params={"crit_chance": self.crit_chance, "crit_multiplier": self.crit_multiplier},
        )
        super().__init__(
            name, cost, effect, "🗡️",
            element="ice", spell_type="projectile", **kwargs,
        )

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        is_crit = self._roll_crit(game_state, self.crit_chance)
        damage = self.damage * self.crit_multiplier if is_crit else self.damage
        damage = math.floor(damage * variation(self.rng, 0.8, 0.4))
        self._deal_damage(game_state, damage)

        key = "ice_spike.hit_crit" if is_crit else "ice_spike.hit"
        return self._succeed(
            _t(key, damage=damage),
            damage=damage,
            is_critical_hit=is_crit,
            details={"spell_type": self.spell_type},
        )

    def get_stats_string(self) -> str:
        return f"DMG: {self.damage} | Crit: {self.crit_chance:.0%}"


class ManaSpring(ElementalCard):
    """法力泉：恢复法力，法力已满时不可打出"""

    card_id = "mana_spring"

    def __init__(self, name: str = "ManaSpring", cost: int = 2, mana_restore: int = 5, **kwargs):
        raise_if_negative(name, "mana_restore", mana_restore)
        self.mana_restore = mana_restore
        effect = EffectDescriptor(
            type="mana",
            target="self",
            value=mana_restore,
            description=_t("mana_spring.desc", mana=mana_restore, net=mana_restore - cost),
            params={"net_gain": mana_restore - cost},
        )
        super().__init__(
            name, cost, effect, "💙",
            element="water", spell_type="utility", cast_time="channeled",
            **kwargs,
        )

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        return game_state.player_mana < game_state.player_max_mana

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        restore = math.floor(self.mana_restore * variation(self.rng, 0.8, 0.4))
        before = game_state.player_mana
        new_mana = min(game_state.player_max_mana, before + restore)
        game_state.update_player_mana(new_mana)
        actual_gain = game_state.player_mana - before

        return self._succeed(
            _t("mana_spring.applied", mana=actual_gain),
            details={
                "mana_restored": restore,
                "actual_gain": actual_gain,
                "new_mana": game_state.player_mana,
                "max_mana": game_state.player_max_mana,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"Mana: +{self.mana_restore} | Net: {self.mana_restore - self.cost:+d}"


class Purify(ElementalCard):
    """净化：移除玩家身上的减益效果，受伤时附带治疗"""

    card_id = "purify"

    def __init__(self, name: str = "Purify", cost: int = 3, heal_amount: int = 5, **kwargs):
        raise_if_negative(name, "heal_amount", heal_amount)
        self.heal_amount = heal_amount
        effect = EffectDescriptor(
            type="cleanse",
            target="self",
            value=heal_amount,
            description=_t("purify.desc", heal=heal_amount),
            params={"heal_amount": heal_amount},
        )
        super().__init__(
            name, cost, effect, "✨",
            element="water", spell_type="utility", cast_time="channeled",
            **kwargs,
        )

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        has_debuffs = any(e.is_debuff for e in game_state.active_effects or [])
        return has_debuffs or game_state.player_hp < game_state.player_max_hp

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        debuffs = [e for e in game_state.active_effects if e.is_debuff]
        for debuff in debuffs:
            game_state.remove_effect(debuff.name)
            self.emit(EventType.STATUS_REMOVED, card=self, effect=debuff, target="player")

        heal = 0
        if game_state.player_hp < game_state.player_max_hp:
            heal = math.floor(self.heal_amount * variation(self.rng, 0.8, 0.4))
            self._heal_player(game_state, heal)

        if heal > 0:
            message = _t("purify.applied_heal", count=len(debuffs), heal=heal)
        else:
            message = _t("purify.applied", count=len(debuffs))
        return self._succeed(
            message,
            healing=heal,
            details={
                "debuffs_removed": len(debuffs),
                "removed_effects": [e.name for e in debuffs],
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"Cleanse | Heal: {self.heal_amount}"


class IceWall(ElementalCard):
    """冰墙：护盾，持续期间攻击者有概率受到冰寒反击"""

    card_id = "ice_wall"
    effect_name = "ice_wall_shield"
    chill_name = "ice_wall_chill"

    def __init__(self, name: str = "IceWall", cost: int = 4, shield_amount: int = 12,
                 duration: int = 3, chill_damage: int = 2, chill_chance: float = 0.50,
                 **kwargs):
        raise_if_negative(name, "shield_amount", shield_amount)
        raise_if_negative(name, "duration", duration)
        raise_if_negative(name, "chill_damage", chill_damage)
        self.shield_amount = shield_amount
        self.shield_duration = duration
        self.chill_damage = chill_damage
        self.chill_chance = chill_chance
        effect = EffectDescriptor(
            type="shield",
            target="self",
            value=shield_amount,
            description=_t(
                "ice_wall.desc", shield=shield_amount, duration=duration,
                chill=chill_damage, chance=f"{chill_chance:.0%}",
            ),
            params={"duration": duration, "chill_damage": chill_damage, "chill_chance": chill_chance},
        )
        super().__init__(
            name, cost, effect, "🧊",
            element="ice", spell_type="abjuration", **kwargs,
        )

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        return not self._has_active_effect(game_state, self.effect_name)

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        calc = DamageCalculator(rng=self.rng).calculate_shield(
            self, shield_bonus=variation(self.rng, 0.9, 0.2), duration=self.shield_duration,
        )
        shield = calc.final_shield if calc.success else 0
        wall = StatusEffect(
            name=self.effect_name,
            effect_type=StatusEffectType.SHIELD,
            magnitude=shield,
            duration=self.shield_duration,
            source=self.name,
            emoji=self.emoji,
            details={"shield_amount": shield},
        )
        chill = StatusEffect(
            name=self.chill_name,
            effect_type=StatusEffectType.RETALIATION,
            magnitude=self.chill_damage,
            duration=self.shield_duration,
            source=self.name,
            emoji="❄️",
            details={"chill_damage": self.chill_damage, "chill_chance": self.chill_chance},
        )
        self._apply_to_player(game_state, wall)
        self._apply_to_player(game_state, chill)

        return self._succeed(
            _t("ice_wall.applied", shield=shield),
            status_effects=[wall, chill],
            details={
                "shield_amount": shield,
                "duration": self.shield_duration,
                "chill_damage": self.chill_damage,
                "chill_chance": self.chill_chance,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"Shield: {self.shield_amount} | Chill: {self.chill_damage} ({self.chill_chance:.0%})"


class HydroBoost(ElementalCard):
    """激流增幅：下一张水系伤害法术伤害提高"""

    card_id = "hydro_boost"
    effect_name = "hydro_boost"

    def __init__(self, name: str = "HydroBoost", cost: int = 3, damage_bonus: float = 0.50,
                 **kwargs):
        raise_if_negative(name, "damage_bonus", damage_bonus)
        self.damage_bonus = damage_bonus
        self.duration = 1
        self.applies_to = "water"
        effect = EffectDescriptor(
            type="damage_buff",
            target="self",
            value=damage_bonus,
            description=_t("hydro_boost.desc", bonus=f"{damage_bonus:.0%}"),
            params={"duration": self.duration, "applies_to": self.applies_to},
        )
        super().__init__(
            name, cost, effect, "🔷",
            element="water", spell_type="buff", **kwargs,
        )

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        return not self._has_active_effect(game_state, self.effect_name)

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        buff = StatusEffect(
            name=self.effect_name,
            effect_type=StatusEffectType.DAMAGE_BUFF,
            magnitude=self.damage_bonus,
            duration=self.duration,
            source=self.name,
            emoji=self.emoji,
            details={"damage_bonus": self.damage_bonus, "applies_to": self.applies_to},
        )
        self._apply_to_player(game_state, buff)
        game_state.last_damage_dealt = 0
        game_state.is_critical_hit = False

        return self._succeed(
            _t("hydro_boost.applied", bonus=f"{self.damage_bonus:.0%}"),
            status_effects=[buff],
            details={
                "buff_applied": True,
                "damage_bonus": self.damage_bonus,
                "applies_to": self.applies_to,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"+{self.damage_bonus:.0%} Water DMG | Next Spell"


class AquaBlast(ElementalCard):
    """水爆：无视目标 30% 防御，消耗激流增幅"""

    card_id = "aqua_blast"

    def __init__(self, name: str = "AquaBlast", cost: int = 5, damage: int = 11,
                 defense_penetration: float = 0.30, **kwargs):
        raise_if_negative(name, "damage", damage)
        raise_if_negative(name, "defense_penetration", defense_penetration)
        self.damage = damage
        self.crit_chance = 0.15
        self.crit_multiplier = 1.5
        self.defense_penetration = defense_penetration
        effect = EffectDescriptor(
            type="damage",
            target="enemy",
            value=damage,
            description=_t(
                "aqua_blast.desc", damage=damage, penetration=f"{defense_penetration:.0%}",
            ),
            params={"crit_chance": self.crit_chance, "defense_penetration": defense_penetration},
        )
        super().__init__(
            name, cost, effect, "💦",
            element="water", spell_type="projectile", **kwargs,
        )

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        is_crit = self._roll_crit(game_state, self.crit_chance)
        damage = self.damage * self.crit_multiplier if is_crit else float(self.damage)

        buff = self._consume_buff(game_state, HydroBoost.effect_name)
        if buff is not None:
            damage *= 1 + buff.details.get("damage_bonus", buff.magnitude)

        defense = getattr(self._effect_holder(game_state, target), "defense", 0) or 0
        reduction = defense_reduction(
            defense, self.defense_penetration, get_config().max_defense_reduction,
        )
        damage = math.floor(damage * (1 - reduction) * variation(self.rng, 0.8, 0.4))
        self._deal_damage(game_state, damage)

        return self._succeed(
            _t("aqua_blast.hit", damage=damage),
            damage=damage,
            is_critical_hit=is_crit,
            details={
                "boosted": buff is not None,
                "defense_penetrated": defense * self.defense_penetration,
                "defense_penetration": self.defense_penetration,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"DMG: {self.damage} | Pen: {self.defense_penetration:.0%}"


class Regen(ElementalCard):
    """回春：持续治疗，施放时立即回复每回合治疗量的一半"""

    card_id = "regen"
    effect_name = "regen"

    def __init__(self, name: str = "Regen", cost: int = 4, heal_per_turn: int = 4,
                 duration: int = 4, **kwargs):
        raise_if_negative(name, "heal_per_turn", heal_per_turn)
        raise_if_negative(name, "duration", duration)
        self.heal_per_turn = heal_per_turn
        self.duration = duration
        self.total_heal = heal_per_turn * duration
        effect = EffectDescriptor(
            type="heal_over_time",
            target="self",
            value=heal_per_turn,
            description=_t("regen.desc", heal=heal_per_turn, duration=duration),
            params={"duration": duration, "total_heal": self.total_heal},
        )
        super().__init__(
            name, cost, effect, "💟",
            element="water", spell_type="restoration", cast_time="channeled",
            **kwargs,
        )

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        return not self._has_active_effect(game_state, self.effect_name)

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        regen = StatusEffect(
            name=self.effect_name,
            effect_type=StatusEffectType.REGEN,
            magnitude=self.heal_per_turn,
            duration=self.duration,
            source=self.name,
            emoji=self.emoji,
            details={"heal_per_turn": self.heal_per_turn, "total_heal": self.total_heal},
        )
        self._apply_to_player(game_state, regen)

        initial_heal = 0
        if game_state.player_hp < game_state.player_max_hp:
            initial_heal = math.floor(self.heal_per_turn * 0.5)
            if initial_heal > 0:
                self._heal_player(game_state, initial_heal)

        return self._succeed(
            _t("regen.applied", heal=self.heal_per_turn, duration=self.duration),
            healing=initial_heal,
            status_effects=[regen],
            details={
                "regen_applied": True,
                "initial_heal": initial_heal,
                "total_heal": self.total_heal,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"{self.heal_per_turn}/turn | {self.duration} turns | Total: {self.total_heal}"
