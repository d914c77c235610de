"""自然系卡牌
日光束、树皮术、荆棘、再生、毒孢子、缠绕、铁木皮、种子炸弹、汲取、光合作用
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from i18n import t as _t

from ..damage_calculator import DamageCalculator
from ..effects.status import StatusEffect, StatusEffectType
from ..exceptions import raise_if_negative
from ..rng import variation
from .base import EffectDescriptor, ElementalCard, ExecutionResult, ResultReason

logger = logging.getLogger(__name__)

# 日光束对这些敌人造成双倍伤害（名称包含即匹配，不区分大小写）
UNDEAD_KEYWORDS: tuple[str, ...] = ("undead", "skeleton", "zombie", "ghost", "wraith", "dark")


def is_undead_name(name: Optional[str]) -> bool:
    if not name:
        return False
    lowered = name.lower()
    return any(keyword in lowered for keyword in UNDEAD_KEYWORDS)


def _target_name(target: Any, game_state: Any) -> str:
    """优先取目标名称，目标无名称时取当前敌人名称"""
    name = getattr(target, "name", None)
    if name:
        return name
    return getattr(game_state.enemy, "name", "") or ""


class SolarBeam(ElementalCard):
    """日光束：对不死/黑暗系敌人双倍伤害"""

    card_id = "solar_beam"

    def __init__(self, name: str = "SolarBeam", cost: int = 7, damage: int = 14, **kwargs):
        raise_if_negative(name, "damage", damage)
        self.damage = damage
        self.undead_multiplier = 2.0
        self.crit_chance = 0.20
        self.crit_multiplier = 1.5
        effect = EffectDescriptor(
            type="damage",
            target="enemy",
            value=damage,
            description=_t("solar_beam.desc", damage=damage),
            params={
                "undead_multiplier": self.undead_multiplier,
                "crit_chance": self.crit_chance,
            },
        )
        super().__init__(
            name, cost, effect, "☀️",
            element="nature", spell_type="projectile", cast_time="channeled",
            **kwargs,
        )

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        damage = float(self.damage)
        vs_undead = is_undead_name(_target_name(target, game_state))
        if vs_undead:
            damage *= self.undead_multiplier

        is_crit = self._roll_crit(game_state, self.crit_chance)
        if is_crit:
            damage *= self.crit_multiplier

        final_damage = math.floor(damage * variation(self.rng, 0.85, 0.30))
        self._deal_damage(game_state, final_damage)

        return self._succeed(
            _t("solar_beam.hit", damage=final_damage),
            damage=final_damage,
            is_critical_hit=is_crit,
            details={
                "vs_undead": vs_undead,
                "undead_multiplier": self.undead_multiplier,
                "crit_chance": self.crit_chance,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"DMG: {self.damage} | 2x vs Undead | Crit: {self.crit_chance:.0%}"


class BarkSkin(ElementalCard):
    """树皮术：数回合内减少所受伤害，不可与自身叠加"""

    card_id = "bark_skin"
    effect_name = "barkskin"

    def __init__(self, name: str = "BarkSkin", cost: int = 4,
                 damage_reduction: float = 0.40, duration: int = 3, **kwargs):
        raise_if_negative(name, "damage_reduction", damage_reduction)
        raise_if_negative(name, "duration", duration)
        self.damage_reduction = damage_reduction
        self.duration = duration
        effect = EffectDescriptor(
            type="buff",
            target="self",
            value=damage_reduction,
            description=_t("bark_skin.desc", reduction=f"{damage_reduction:.0%}", duration=duration),
            params={"damage_reduction": damage_reduction, "duration": duration},
        )
        super().__init__(
            name, cost, effect, "🪵",
            element="nature", spell_type="defensive", cast_time="channeled",
            **kwargs,
        )

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        return not self._has_active_effect(game_state, self.effect_name)

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        effect = StatusEffect(
            name=self.effect_name,
            effect_type=StatusEffectType.DAMAGE_REDUCTION,
            magnitude=self.damage_reduction,
            duration=self.duration,
            source=self.name,
            emoji=self.emoji,
            details={"damage_reduction": self.damage_reduction},
        )
        self._apply_to_player(game_state, effect)

        return self._succeed(
            _t("bark_skin.applied", reduction=f"{self.damage_reduction:.0%}"),
            status_effects=[effect],
            details={
                "buff_applied": True,
                "damage_reduction": self.damage_reduction,
                "duration": self.duration,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"-{self.damage_reduction:.0%} DMG | {self.duration} turns"


class Thorns(ElementalCard):
    """荆棘：反弹伤害，不可与自身叠加"""

    card_id = "thorns"
    effect_name = "thorns"

    def __init__(self, name: str = "Thorns", cost: int = 4,
                 reflect_damage: int = 4, duration: int = 3, **kwargs):
        raise_if_negative(name, "reflect_damage", reflect_damage)
        raise_if_negative(name, "duration", duration)
        self.reflect_damage = reflect_damage
        self.duration = duration
        effect = EffectDescriptor(
            type="buff",
            target="self",
            value=reflect_damage,
            description=_t("thorns.desc", reflect=reflect_damage, duration=duration),
            params={"reflect_damage": reflect_damage, "duration": duration},
        )
        super().__init__(
            name, cost, effect, "🌵",
            element="nature", spell_type="defensive", **kwargs,
        )

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        return not self._has_active_effect(game_state, self.effect_name)

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        effect = StatusEffect(
            name=self.effect_name,
            effect_type=StatusEffectType.REFLECTION,
            magnitude=self.reflect_damage,
            duration=self.duration,
            source=self.name,
            emoji=self.emoji,
            details={"reflect_damage": self.reflect_damage},
        )
        self._apply_to_player(game_state, effect)

        return self._succeed(
            _t("thorns.applied", reflect=self.reflect_damage),
            status_effects=[effect],
            details={
                "buff_applied": True,
                "reflect_damage": self.reflect_damage,
                "duration": self.duration,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"Reflect: {self.reflect_damage} | {self.duration} turns"


class Regrow(ElementalCard):
    """再生：立即治疗并附带持续回复"""

    card_id = "regrow"
    effect_name = "nature_regen"

    def __init__(self, name: str = "Regrow", cost: int = 4, heal_amount: int = 12,
                 regen_per_turn: int = 3, regen_duration: int = 2, **kwargs):
        raise_if_negative(name, "heal_amount", heal_amount)
        raise_if_negative(name, "regen_per_turn", regen_per_turn)
        raise_if_negative(name, "regen_duration", regen_duration)
        self.heal_amount = heal_amount
        self.regen_per_turn = regen_per_turn
        self.regen_duration = regen_duration
        effect = EffectDescriptor(
            type="heal",
            target="self",
            value=heal_amount,
            description=_t(
                "regrow.desc", heal=heal_amount, regen=regen_per_turn, duration=regen_duration,
            ),
            params={
                "regen_per_turn": regen_per_turn,
                "regen_duration": regen_duration,
            },
        )
        super().__init__(
            name, cost, effect, "🌱",
            element="nature", spell_type="healing", cast_time="channeled",
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

        heal = math.floor(self.heal_amount * variation(self.rng, 0.85, 0.30))
        self._heal_player(game_state, heal)

        regen = StatusEffect(
            name=self.effect_name,
            effect_type=StatusEffectType.REGEN,
            magnitude=self.regen_per_turn,
            duration=self.regen_duration,
            source=self.name,
            emoji="💚",
            details={"heal_per_turn": self.regen_per_turn},
        )
        self._apply_to_player(game_state, regen)

        return self._succeed(
            _t("regrow.applied", heal=heal),
            healing=heal,
            status_effects=[regen],
            details={
                "regen_applied": True,
                "total_healing": heal + self.regen_per_turn * self.regen_duration,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"Heal: {self.heal_amount} + {self.regen_per_turn}/turn"


class Poison(ElementalCard):
    """毒孢子：可叠加的持续伤害，命中时附带少量即时伤害"""

    card_id = "poison"
    effect_name = "poison"

    def __init__(self, name: str = "Poison", cost: int = 3, dot_damage: int = 4,
                 duration: int = 3, max_stacks: int = 5, **kwargs):
        raise_if_negative(name, "dot_damage", dot_damage)
        raise_if_negative(name, "duration", duration)
        self.dot_damage = dot_damage
        self.duration = duration
        self.max_stacks = max_stacks
        effect = EffectDescriptor(
            type="dot",
            target="enemy",
            value=dot_damage,
            description=_t(
                "poison.desc", damage=dot_damage, duration=duration, max_stacks=max_stacks,
            ),
            params={"duration": duration, "max_stacks": max_stacks},
        )
        super().__init__(
            name, cost, effect, "☠️",
            element="nature", spell_type="dot", **kwargs,
        )

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        holder = self._effect_holder(game_state, target)
        existing = holder.get_effect(self.effect_name) if holder is not None else None
        current_stacks = existing.stacks if existing is not None else 0
        new_stacks = min(current_stacks + 1, self.max_stacks)

        poison = StatusEffect(
            name=self.effect_name,
            effect_type=StatusEffectType.POISON,
            magnitude=self.dot_damage,
            duration=self.duration,
            source=self.name,
            emoji=self.emoji,
            stacks=new_stacks,
            max_stacks=self.max_stacks,
            details={"total_damage_per_turn": self.dot_damage * new_stacks},
        )
        if existing is not None:
            holder.update_effect(poison)
            self.emit_log(f"{self.name}: poison stacks {current_stacks} -> {new_stacks}")
            applied = True
        else:
            applied = self._apply_to_enemy(game_state, poison, target)

        initial_damage = math.floor(self.dot_damage * 0.5)
        if initial_damage > 0:
            self._deal_damage(game_state, initial_damage)

        if not applied:
            return self._succeed(
                _t("card.effect_not_applied", name=self.name, damage=initial_damage),
                damage=initial_damage,
                details={"stacks": 0, "max_stacks": self.max_stacks, "total_dot_damage": 0,
                         "spell_type": self.spell_type},
            )
        return self._succeed(
            _t("poison.applied", stacks=new_stacks, max_stacks=self.max_stacks),
            damage=initial_damage,
            status_effects=[poison],
            details={
                "stacks": new_stacks,
                "max_stacks": self.max_stacks,
                "total_dot_damage": self.dot_damage * new_stacks * self.duration,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"DoT: {self.dot_damage}/turn | {self.duration} turns | Max {self.max_stacks} stacks"


class Entangle(ElementalCard):
    """缠绕：造成伤害并眩晕敌人，附带束缚持续伤害"""

    card_id = "entangle"

    def __init__(self, name: str = "Entangle", cost: int = 5, damage: int = 4,
                 stun_duration: int = 1, dot_damage: int = 2, dot_duration: int = 2, **kwargs):
        raise_if_negative(name, "damage", damage)
        raise_if_negative(name, "stun_duration", stun_duration)
        raise_if_negative(name, "dot_damage", dot_damage)
        raise_if_negative(name, "dot_duration", dot_duration)
        self.damage = damage
        self.stun_duration = stun_duration
        self.dot_damage = dot_damage
        self.dot_duration = dot_duration
        effect = EffectDescriptor(
            type="damage",
            target="enemy",
            value=damage,
            description=_t("entangle.desc", damage=damage, stun=stun_duration),
            params={
                "stun_duration": stun_duration,
                "dot_damage": dot_damage,
                "dot_duration": dot_duration,
            },
        )
        super().__init__(
            name, cost, effect, "🕸️",
            element="nature", spell_type="crowd_control", **kwargs,
        )

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        damage = math.floor(self.damage * variation(self.rng, 0.8, 0.4))
        self._deal_damage(game_state, damage)

        stun = StatusEffect(
            name="entangled",
            effect_type=StatusEffectType.CROWD_CONTROL,
            magnitude=0,
            duration=self.stun_duration,
            source=self.name,
            emoji=self.emoji,
            details={"prevents_action": True},
        )
        constriction = StatusEffect(
            name="constriction",
            effect_type=StatusEffectType.NATURE_DOT,
            magnitude=self.dot_damage,
            duration=self.dot_duration,
            source=self.name,
            emoji="🌿",
        )
        applied = [
            effect for effect in (stun, constriction)
            if self._apply_to_enemy(game_state, effect, target)
        ]
        stun_applied = stun in applied

        if stun_applied:
            message = _t("entangle.applied", stun=self.stun_duration)
        else:
            message = _t("card.effect_not_applied", name=self.name, damage=damage)
        dot_total = self.dot_damage * self.dot_duration if constriction in applied else 0
        return self._succeed(
            message,
            damage=damage,
            status_effects=applied,
            details={
                "stun_applied": stun_applied,
                "total_damage": damage + dot_total,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"DMG: {self.damage} | Stun: {self.stun_duration} turn | DoT: {self.dot_damage}"


class Ironbark(ElementalCard):
    """铁木皮：吸收伤害的护盾，不可与自身叠加"""

    card_id = "ironbark"
    effect_name = "ironbark"

    def __init__(self, name: str = "Ironbark", cost: int = 6, shield_amount: int = 20,
                 duration: int = 4, **kwargs):
        raise_if_negative(name, "shield_amount", shield_amount)
        raise_if_negative(name, "duration", duration)
        self.shield_amount = shield_amount
        self.shield_duration = duration
        effect = EffectDescriptor(
            type="shield",
            target="self",
            value=shield_amount,
            description=_t("ironbark.desc", shield=shield_amount, duration=duration),
            params={"duration": duration},
        )
        super().__init__(
            name, cost, effect, "🛡️",
            element="nature", spell_type="defensive", cast_time="channeled",
            **kwargs,
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
        effect = StatusEffect(
            name=self.effect_name,
            effect_type=StatusEffectType.SHIELD,
            magnitude=shield,
            duration=self.shield_duration,
            source=self.name,
            emoji=self.emoji,
            details={"shield_amount": shield},
        )
        self._apply_to_player(game_state, effect)

        return self._succeed(
            _t("ironbark.applied", shield=shield, duration=self.shield_duration),
            status_effects=[effect],
            details={
                "shield_amount": shield,
                "duration": self.shield_duration,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"Shield: {self.shield_amount} | {self.shield_duration} turns"


class SeedBomb(ElementalCard):
    """种子炸弹：固定 3 段，每段伤害在 [damage_per_hit, 2 * damage_per_hit] 之间"""

    card_id = "seed_bomb"

    def __init__(self, name: str = "SeedBomb", cost: int = 5, damage_per_hit: int = 4,
                 number_of_hits: int = 3, **kwargs):
        raise_if_negative(name, "damage_per_hit", damage_per_hit)
        raise_if_negative(name, "number_of_hits", number_of_hits)
        self.damage_per_hit = damage_per_hit
        self.number_of_hits = number_of_hits
        self.min_damage = damage_per_hit
        self.max_damage = damage_per_hit * 2
        effect = EffectDescriptor(
            type="multi_hit",
            target="enemy",
            value=damage_per_hit,
            description=_t("seed_bomb.desc", hits=number_of_hits, damage=damage_per_hit),
            params={
                "number_of_hits": number_of_hits,
                "min_damage": self.min_damage,
                "max_damage": self.max_damage,
            },
        )
        super().__init__(
            name, cost, effect, "🌰",
            element="nature", spell_type="barrage", **kwargs,
        )

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        damage_range = self.max_damage - self.min_damage
        hit_damages: list[int] = []
        for _ in range(self.number_of_hits):
            hit = self.min_damage + math.floor(self.rng.random() * (damage_range + 1))
            self._deal_damage(game_state, hit)
            hit_damages.append(hit)
            if game_state.enemy_hp <= 0:
                break

        total = sum(hit_damages)
        game_state.last_damage_dealt = total
        return self._succeed(
            _t("seed_bomb.hit", hits=len(hit_damages), damage=total),
            damage=total,
            details={
                "number_of_hits": len(hit_damages),
                "hit_damages": hit_damages,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"{self.number_of_hits} hits | {self.min_damage}-{self.max_damage} each"


class Sap(ElementalCard):
    """汲取：造成伤害并按造成的伤害治疗自身（不超过已损失生命）"""

    card_id = "sap"

    def __init__(self, name: str = "Sap", cost: int = 4, damage: int = 8, **kwargs):
        raise_if_negative(name, "damage", damage)
        self.damage = damage
        effect = EffectDescriptor(
            type="lifesteal",
            target="enemy",
            value=damage,
            description=_t("sap.desc", damage=damage),
            params={"drain_type": "life", "drain_ratio": 1.0},
        )
        super().__init__(
            name, cost, effect, "🩸",
            element="nature", spell_type="drain", cast_time="channeled",
            **kwargs,
        )

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        return game_state.enemy_hp > 0

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        damage = math.floor(self.damage * variation(self.rng, 0.85, 0.30))
        self._deal_damage(game_state, damage)

        missing = game_state.player_max_hp - game_state.player_hp
        heal = max(0, min(damage, missing))
        if heal > 0:
            self._heal_player(game_state, heal)

        return self._succeed(
            _t("sap.hit", damage=damage, heal=heal),
            damage=damage,
            healing=heal,
            details={"drained": heal, "spell_type": self.spell_type},
        )

    def get_stats_string(self) -> str:
        return f"DMG: {self.damage} | Lifesteal 100%"


class Photosynthesis(ElementalCard):
    """光合作用：数回合内每回合回复法力，不可与自身叠加"""

    card_id = "photosynthesis"
    effect_name = "photosynthesis"

    def __init__(self, name: str = "Photosynthesis", cost: int = 2, mana_per_turn: int = 2,
                 duration: int = 3, **kwargs):
        raise_if_negative(name, "mana_per_turn", mana_per_turn)
        raise_if_negative(name, "duration", duration)
        self.mana_per_turn = mana_per_turn
        self.duration = duration
        self.total_mana = mana_per_turn * duration
        effect = EffectDescriptor(
            type="mana_regen",
            target="self",
            value=mana_per_turn,
            description=_t("photosynthesis.desc", mana=mana_per_turn, duration=duration),
            params={"duration": duration, "total_mana": self.total_mana},
        )
        super().__init__(
            name, cost, effect, "🌞",
            element="nature", spell_type="utility", cast_time="channeled",
            **kwargs,
        )

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        return not self._has_active_effect(game_state, self.effect_name)

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        effect = StatusEffect(
            name=self.effect_name,
            effect_type=StatusEffectType.MANA_REGEN,
            magnitude=self.mana_per_turn,
            duration=self.duration,
            source=self.name,
            emoji=self.emoji,
            details={"mana_per_turn": self.mana_per_turn, "total_mana": self.total_mana},
        )
        self._apply_to_player(game_state, effect)

        return self._succeed(
            _t("photosynthesis.applied", mana=self.mana_per_turn, duration=self.duration),
            status_effects=[effect],
            details={
                "mana_regen_applied": True,
                "mana_per_turn": self.mana_per_turn,
                "total_mana": self.total_mana,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"{self.mana_per_turn} mana/turn | {self.duration} turns | Total: {self.total_mana}"
