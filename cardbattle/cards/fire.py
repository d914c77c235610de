"""火系卡牌
烈焰冲击、火球术、余烬、火焰风暴、炼狱、自燃
"""

from __future__ import annotations

import logging
import math

from i18n import t as _t

from ..config import get_config
from ..damage_calculator import defense_reduction
from ..effects.status import StatusEffect, StatusEffectType
from ..exceptions import raise_if_negative
from ..rng import roll, variation
from .base import EffectDescriptor, ElementalCard, ExecutionResult, ResultReason

logger = logging.getLogger(__name__)


class FireBlast(ElementalCard):
    """烈焰冲击：高伤害火焰法术"""

    card_id = "fire_blast"

    def __init__(self, name: str = "Fire Blast", cost: int = 5, damage: int = 10, **kwargs):
        raise_if_negative(name, "damage", damage)
        self.damage = damage
        self.crit_chance = 0.15
        self.crit_multiplier = 1.5
        effect = EffectDescriptor(
            type="damage",
            target="enemy",
            value=damage,
            description=_t("fire_blast.desc", damage=damage),
            params={"crit_chance": self.crit_chance, "crit_multiplier": self.crit_multiplier},
        )
        super().__init__(
            name, cost, effect, "🔥",
            element="fire", spell_type="projectile", **kwargs,
        )

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        is_crit = self._roll_crit(game_state, self.crit_chance)
        damage = math.floor(self.damage * self.crit_multiplier) if is_crit else self.damage
        self._deal_damage(game_state, damage)

        return self._succeed(
            _t("fire_blast.hit", name=self.name, damage=damage),
            damage=damage,
            is_critical_hit=is_crit,
            details={"spell_type": self.spell_type},
        )

    def get_stats_string(self) -> str:
        return f"DMG: {self.damage} | Crit: {self.crit_chance:.0%}"


class Fireball(ElementalCard):
    """火球术：可能点燃敌人"""

    card_id = "fireball"
    burn_name = "burn"

    def __init__(self, name: str = "Fireball", cost: int = 4, damage: int = 8,
                 burn_chance: float = 0.10, burn_damage: int = 2, burn_duration: int = 2,
                 **kwargs):
        raise_if_negative(name, "damage", damage)
        raise_if_negative(name, "burn_chance", burn_chance)
        raise_if_negative(name, "burn_damage", burn_damage)
        self.damage = damage
        self.crit_chance = 0.12
        self.crit_multiplier = 1.5
        self.burn_chance = burn_chance
        self.burn_damage = burn_damage
        self.burn_duration = burn_duration
        effect = EffectDescriptor(
            type="damage",
            target="enemy",
            value=damage,
            description=_t("fireball.desc", damage=damage, burn_chance=f"{burn_chance:.0%}"),
            params={
                "crit_chance": self.crit_chance,
                "burn_chance": burn_chance,
                "burn_damage": burn_damage,
                "burn_duration": burn_duration,
            },
        )
        super().__init__(
            name, cost, effect, "🔵",
            element="fire", spell_type="projectile", **kwargs,
        )

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        is_crit = self._roll_crit(game_state, self.crit_chance)
        damage = math.floor(self.damage * self.crit_multiplier) if is_crit else self.damage
        self._deal_damage(game_state, damage)

        status_effects = []
        if roll(self.rng, self.burn_chance):
            burn = StatusEffect(
                name=self.burn_name,
                effect_type=StatusEffectType.BURN,
                magnitude=self.burn_damage,
                duration=self.burn_duration,
                source=self.name,
                emoji="🔥",
            )
            if self._apply_to_enemy(game_state, burn, target):
                status_effects.append(burn)

        key = "fireball.hit_burn" if status_effects else "fireball.hit"
        return self._succeed(
            _t(key, damage=damage),
            damage=damage,
            is_critical_hit=is_crit,
            status_effects=status_effects,
            details={"burn_applied": bool(status_effects), "spell_type": self.spell_type},
        )

    def get_stats_string(self) -> str:
        return f"DMG: {self.damage} | Burn: {self.burn_chance:.0%}"


class Ember(ElementalCard):
    """余烬：少量即时伤害，附带可叠加的灼烧"""

    card_id = "ember"
    effect_name = "ember_burn"

    def __init__(self, name: str = "Ember", cost: int = 2, damage: int = 3,
                 dot_damage: int = 3, duration: int = 3, max_stacks: int = 5, **kwargs):
        raise_if_negative(name, "damage", damage)
        raise_if_negative(name, "dot_damage", dot_damage)
        raise_if_negative(name, "duration", duration)
        self.damage = damage
        self.dot_damage = dot_damage
        self.duration = duration
        self.max_stacks = max_stacks
        effect = EffectDescriptor(
            type="damage",
            target="enemy",
            value=damage,
            description=_t("ember.desc", damage=damage, dot=dot_damage, duration=duration),
            params={"dot_damage": dot_damage, "duration": duration, "max_stacks": max_stacks},
        )
        super().__init__(
            name, cost, effect, "🔥",
            element="fire", spell_type="dot", **kwargs,
        )

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        initial_damage = math.floor(self.damage * variation(self.rng, 0.9, 0.2))
        self._deal_damage(game_state, initial_damage)

        holder = self._effect_holder(game_state, target)
        existing = holder.get_effect(self.effect_name) if holder is not None else None
        if existing is not None:
            if existing.stacks < existing.max_stacks:
                existing.stacks += 1
                existing.turns_remaining = max(existing.turns_remaining or 0, self.duration)
            burn = existing
            applied = True
        else:
            burn = StatusEffect(
                name=self.effect_name,
                effect_type=StatusEffectType.BURN,
                magnitude=self.dot_damage,
                duration=self.duration,
                source=self.name,
                emoji=self.emoji,
                max_stacks=self.max_stacks,
            )
            applied = self._apply_to_enemy(game_state, burn, target)

        if not applied:
            return self._succeed(
                _t("card.effect_not_applied", name=self.name, damage=initial_damage),
                damage=initial_damage,
                details={
                    "stacks": 0,
                    "total_expected_damage": initial_damage,
                    "spell_type": self.spell_type,
                },
            )
        dot_per_turn = self.dot_damage * burn.stacks
        return self._succeed(
            _t("ember.hit", damage=initial_damage, dot=dot_per_turn),
            damage=initial_damage,
            status_effects=[burn],
            details={
                "stacks": burn.stacks,
                "total_expected_damage": initial_damage + dot_per_turn * self.duration,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"DMG: {self.damage} + {self.dot_damage}/turn | Max {self.max_stacks} stacks"


class Firestorm(ElementalCard):
    """
    火焰风暴：随机 3~5 段连击

    每段伤害在 [damage_per_hit, 2 * damage_per_hit] 之间，10% 概率暴击（x1.5）。
    敌人倒下后剩余段数不再结算。
    """

    card_id = "firestorm"

    def __init__(self, name: str = "Firestorm", cost: int = 7, damage_per_hit: int = 4,
                 min_hits: int = 3, max_hits: int = 5, **kwargs):
        raise_if_negative(name, "damage_per_hit", damage_per_hit)
        raise_if_negative(name, "min_hits", min_hits)
        self.damage_per_hit = damage_per_hit
        self.min_hits = min_hits
        self.max_hits = max(min_hits, max_hits)
        self.crit_chance = 0.10
        self.crit_multiplier = 1.5
        effect = EffectDescriptor(
            type="multi_hit",
            target="enemy",
            value=damage_per_hit,
            description=_t(
                "firestorm.desc", damage=damage_per_hit,
                min_hits=self.min_hits, max_hits=self.max_hits,
            ),
            params={"min_hits": self.min_hits, "max_hits": self.max_hits, "damage_variance": 1.0},
        )
        super().__init__(
            name, cost, effect, "🌪️",
            element="fire", spell_type="area_barrage", cast_time="channeled",
            **kwargs,
        )

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        return game_state.enemy_hp >= self.damage_per_hit * self.min_hits

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        span = self.max_hits - self.min_hits + 1
        number_of_hits = math.floor(self.rng.random() * span) + self.min_hits

        hit_damages: list[int] = []
        critical_hits = 0
        for _ in range(number_of_hits):
            hit = math.floor(self.damage_per_hit * variation(self.rng, 1.0, 1.0))
            if roll(self.rng, self.crit_chance):
                hit = math.floor(hit * self.crit_multiplier)
                critical_hits += 1
            self._deal_damage(game_state, hit)
            hit_damages.append(hit)
            if game_state.enemy_hp <= 0:
                break

        total = sum(hit_damages)
        game_state.last_damage_dealt = total
        game_state.is_critical_hit = critical_hits > 0
        logger.info("%s landed %d/%d hits for %d damage", self.name,
                    len(hit_damages), number_of_hits, total)

        return self._succeed(
            _t("firestorm.hit", hits=len(hit_damages), damage=total),
            damage=total,
            is_critical_hit=critical_hits > 0,
            details={
                "number_of_hits": len(hit_damages),
                "hit_damages": hit_damages,
                "critical_hits": critical_hits,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        low = self.damage_per_hit * self.min_hits
        high = self.damage_per_hit * 2 * self.max_hits
        return f"Hits: {self.min_hits}-{self.max_hits} | DMG: {low}-{high}"


class Inferno(ElementalCard):
    """炼狱：高伤害，无视目标一半防御"""

    card_id = "inferno"

    def __init__(self, name: str = "Inferno", cost: int = 9, damage: int = 18,
                 defense_penetration: float = 0.50, **kwargs):
        raise_if_negative(name, "damage", damage)
        raise_if_negative(name, "defense_penetration", defense_penetration)
        self.damage = damage
        self.crit_chance = 0.25
        self.crit_multiplier = 2.0
        self.defense_penetration = defense_penetration
        effect = EffectDescriptor(
            type="damage",
            target="enemy",
            value=damage,
            description=_t(
                "inferno.desc", damage=damage, crit_chance=f"{self.crit_chance:.0%}",
                penetration=f"{defense_penetration:.0%}",
            ),
            params={
                "crit_chance": self.crit_chance,
                "crit_multiplier": self.crit_multiplier,
                "defense_penetration": defense_penetration,
            },
        )
        super().__init__(
            name, cost, effect, "🌋",
            element="fire", spell_type="cataclysm", cast_time="channeled",
            **kwargs,
        )

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        return game_state.enemy_hp > 5

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        is_crit = self._roll_crit(game_state, self.crit_chance)
        damage = self.damage * self.crit_multiplier if is_crit else float(self.damage)

        defense = getattr(self._effect_holder(game_state, target), "defense", 0) or 0
        reduction = defense_reduction(
            defense, self.defense_penetration, get_config().max_defense_reduction,
        )
        damage = math.floor(damage * (1 - reduction) * variation(self.rng, 0.85, 0.30))
        self._deal_damage(game_state, damage)

        return self._succeed(
            _t("inferno.hit", damage=damage),
            damage=damage,
            is_critical_hit=is_crit,
            details={
                "defense_penetrated": defense * self.defense_penetration,
                "defense_reduction": reduction,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return (f"DMG: {self.damage} | Crit: {self.crit_chance:.0%} "
                f"| Pen: {self.defense_penetration:.0%}")


class Combust(ElementalCard):
    """
    自燃：斩杀

    敌人生命不高于 30% 时伤害翻倍；击杀时返还 80% 法力消耗。
    """

    card_id = "combust"

    def __init__(self, name: str = "Combust", cost: int = 3, damage: int = 12,
                 execute_threshold: float = 0.30, execute_multiplier: float = 2.0,
                 refund_ratio: float = 0.8, **kwargs):
        raise_if_negative(name, "damage", damage)
        raise_if_negative(name, "execute_threshold", execute_threshold)
        raise_if_negative(name, "refund_ratio", refund_ratio)
        self.damage = damage
        self.execute_threshold = execute_threshold
        self.execute_multiplier = execute_multiplier
        self.refund_ratio = refund_ratio
        effect = EffectDescriptor(
            type="execute",
            target="enemy",
            value=damage,
            description=_t(
                "combust.desc", damage=damage, threshold=f"{execute_threshold:.0%}",
            ),
            params={
                "execute_threshold": execute_threshold,
                "execute_multiplier": execute_multiplier,
                "refund_on_kill": True,
            },
        )
        super().__init__(
            name, cost, effect, "💥",
            element="fire", spell_type="execution", **kwargs,
        )

    @property
    def refund_amount(self) -> int:
        return math.floor(self.cost * self.refund_ratio)

    def can_play(self, game_state) -> bool:
        if not super().can_play(game_state):
            return False
        return game_state.enemy_hp > 0

    def execute_effect(self, game_state, target=None) -> ExecutionResult:
        if target is None:
            return self._fail(ResultReason.NO_TARGET)
        if game_state is None:
            return self._fail(ResultReason.NO_GAME_STATE)

        max_hp = getattr(game_state, "enemy_max_hp", 0) or 0
        is_execute = max_hp > 0 and game_state.enemy_hp / max_hp <= self.execute_threshold
        damage = self.damage * self.execute_multiplier if is_execute else float(self.damage)
        damage = math.floor(damage * variation(self.rng, 0.9, 0.2))

        hp_before = game_state.enemy_hp
        self._deal_damage(game_state, damage)
        is_kill = hp_before > 0 and game_state.enemy_hp <= 0

        refund = 0
        if is_kill and self.refund_amount > 0:
            refund = self.refund_amount
            game_state.update_player_mana(game_state.player_mana + refund)
            logger.info("%s refunded %d mana", self.name, refund)

        if is_kill:
            message = _t("combust.kill", damage=damage, mana=refund)
        elif is_execute:
            message = _t("combust.execute", damage=damage)
        else:
            message = _t("combust.hit", damage=damage)
        return self._succeed(
            message,
            damage=damage,
            details={
                "is_execute": is_execute,
                "is_kill": is_kill,
                "mana_refunded": refund > 0,
                "mana_refund_amount": refund,
                "spell_type": self.spell_type,
            },
        )

    def get_stats_string(self) -> str:
        return f"DMG: {self.damage} | x2 below {self.execute_threshold:.0%} | Refund on kill"
