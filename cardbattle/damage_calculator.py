# -*- coding: utf-8 -*-
"""
伤害计算模块
负责伤害、治疗与护盾数值的计算

计算流程（伤害）:
    基础伤害 → 防御减免 → 暴击 → 元素克制 → 随机浮动 → 最低 1 点

本模块只做计算，不修改任何游戏状态。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import GameConfig, get_config
from .rng import RandomSource, make_rng, roll, variation

logger = logging.getLogger(__name__)


# 元素克制表：攻击方元素 -> {防御方元素: 倍率}
ELEMENTAL_ADVANTAGES: Dict[str, Dict[str, float]] = {
    "fire": {"ice": 1.5, "grass": 1.5},
    "ice": {"fire": 1.5, "water": 1.5},
    "water": {"fire": 1.5, "earth": 1.5},
    "earth": {"water": 1.5, "wind": 1.5},
    "wind": {"earth": 1.5, "fire": 1.5},
    "grass": {"water": 1.5, "earth": 1.5},
}


def elemental_bonus(attacker_element: str, defender_element: str) -> float:
    """查询元素克制倍率，无克制关系返回 1.0"""
    return ELEMENTAL_ADVANTAGES.get(attacker_element, {}).get(defender_element, 1.0)


def defense_reduction(defense: float, penetration: float = 0.0, cap: float = 0.5) -> float:
    """
    防御减伤比例

    每点防御减伤 1%，穿透按比例无视防御，结果不超过 cap。
    """
    effective = max(0.0, defense or 0) * (1 - penetration)
    return min(effective / 100, cap)


@dataclass
class AttackInfo:
    """攻击附加信息，is_critical_hit 为 None 时按配置概率判定"""
    is_critical_hit: Optional[bool] = None
    critical_multiplier: Optional[float] = None


@dataclass
class DamageCalculation:
    """伤害计算结果"""
    success: bool
    error: str = ""
    base_damage: float = 0
    defense_reduced_damage: float = 0
    critical_damage: float = 0
    elemental_damage: float = 0
    final_damage: int = 0
    is_critical_hit: bool = False
    elemental_bonus: float = 1.0
    defense_reduction_pct: float = 0.0
    attacker: str = "unknown"
    defender: str = "unknown"


@dataclass
class HealingCalculation:
    """治疗计算结果"""
    success: bool
    error: str = ""
    base_heal: float = 0
    bonus_heal: float = 0
    critical_heal: float = 0
    final_heal: int = 0
    is_critical_heal: bool = False
    healing_bonus: float = 1.0
    critical_multiplier: float = 1.0
    healer: str = "unknown"
    target: str = "self"


@dataclass
class ShieldCalculation:
    """护盾计算结果"""
    success: bool
    error: str = ""
    base_shield: float = 0
    final_shield: int = 0
    duration: int = 0
    shield_bonus: float = 1.0
    source: str = "unknown"
    target: str = "self"


def _name_of(obj: Any, fallback: str = "unknown") -> str:
    return getattr(obj, "name", None) or fallback


class DamageCalculator:
    """
    伤害计算器

    可在不同战斗场景中复用，随机源与配置均可注入。
    """

    def __init__(self, rng: Optional[RandomSource] = None,
                 config: Optional[GameConfig] = None):
        """
        Args:
            rng: 随机源（默认新建 random.Random）
            config: 游戏配置（默认全局配置）
        """
        self.rng = rng or make_rng()
        self.config = config or get_config()

    # ==================== 伤害 ====================

    def calculate_damage(
        self,
        attacker: Any,
        defender: Any,
        attack_info: Optional[AttackInfo] = None,
    ) -> DamageCalculation:
        """
        计算伤害

        Args:
            attacker: 攻击方（卡牌取 damage，敌人取 attack_power）
            defender: 防御方（读取 defense、element）
            attack_info: 攻击附加信息

        Returns:
            DamageCalculation: 缺少攻击方或防御方时 success=False
        """
        if attacker is None or defender is None:
            logger.error("Invalid attacker or defender provided to calculate_damage")
            return DamageCalculation(success=False, error="invalid_inputs")

        info = attack_info or AttackInfo()

        base = self._get_base_damage(attacker) * self.config.damage_multiplier
        reduction = self._defense_reduction(defender)
        reduced = base * (1 - reduction)

        is_crit = info.is_critical_hit
        if is_crit is None:
            is_crit = roll(self.rng, self.config.critical_hit_chance)
        crit_multiplier = info.critical_multiplier or self.config.critical_hit_multiplier
        critical = reduced * crit_multiplier if is_crit else reduced

        bonus = elemental_bonus(
            getattr(attacker, "element", None) or "neutral",
            getattr(defender, "element", None) or "neutral",
        )
        elemental = critical * bonus

        final = int(elemental * variation(self.rng, 0.8, 0.4))
        final = max(1, final)

        result = DamageCalculation(
            success=True,
            base_damage=base,
            defense_reduced_damage=reduced,
            critical_damage=critical,
            elemental_damage=elemental,
            final_damage=final,
            is_critical_hit=is_crit,
            elemental_bonus=bonus,
            defense_reduction_pct=reduction * 100,
            attacker=_name_of(attacker),
            defender=_name_of(defender),
        )
        logger.debug(
            "Damage calculation: %s -> %s: %d damage",
            result.attacker, result.defender, result.final_damage,
        )
        return result

    def calculate_card_damage(self, card: Any, enemy: Any) -> DamageCalculation:
        """卡牌攻击的便捷方法：先判定暴击再计算"""
        info = AttackInfo(is_critical_hit=roll(self.rng, self.config.critical_hit_chance))
        return self.calculate_damage(card, enemy, info)

    # ==================== 治疗 ====================

    def calculate_healing(
        self,
        healer: Any,
        target: Any = None,
        base_heal: Optional[float] = None,
        healing_bonus: float = 1.0,
        crit_chance: float = 0.0,
        is_critical_heal: Optional[bool] = None,
        critical_multiplier: Optional[float] = None,
    ) -> HealingCalculation:
        """
        计算治疗量

        浮动范围 ±10%（小于伤害浮动），最低 1 点。
        """
        if healer is None:
            logger.error("Invalid healer provided to calculate_healing")
            return HealingCalculation(success=False, error="invalid_healer")

        base = base_heal
        if base is None:
            base = getattr(healer, "heal_amount", None) or getattr(healer, "value", 0) or 0
        if base <= 0:
            logger.warning("Healing amount is 0 or negative")
            return HealingCalculation(success=False, error="no_healing_base")

        bonus_heal = base * healing_bonus

        is_crit = is_critical_heal
        if is_crit is None:
            is_crit = roll(self.rng, crit_chance)
        multiplier = (critical_multiplier or self.config.critical_hit_multiplier) if is_crit else 1.0
        critical = bonus_heal * multiplier

        final = max(1, int(critical * variation(self.rng, 0.9, 0.2)))

        return HealingCalculation(
            success=True,
            base_heal=base,
            bonus_heal=bonus_heal,
            critical_heal=critical,
            final_heal=final,
            is_critical_heal=is_crit,
            healing_bonus=healing_bonus,
            critical_multiplier=multiplier,
            healer=_name_of(healer),
            target=_name_of(target, "self"),
        )

    # ==================== 护盾 ====================

    def calculate_shield(
        self,
        card: Any,
        target: Any = None,
        base_shield: Optional[float] = None,
        shield_bonus: float = 1.0,
        duration: Optional[int] = None,
    ) -> ShieldCalculation:
        """计算护盾值，持续时间默认 3 回合"""
        if card is None:
            logger.error("Invalid card provided to calculate_shield")
            return ShieldCalculation(success=False, error="invalid_card")

        base = base_shield
        if base is None:
            base = getattr(card, "shield_amount", None) or getattr(card, "value", 0) or 0
        if base <= 0:
            logger.warning("Shield amount is 0 or negative")
            return ShieldCalculation(success=False, error="no_shield_base")

        turns = duration or getattr(card, "shield_duration", None) or 3

        return ShieldCalculation(
            success=True,
            base_shield=base,
            final_shield=int(base * shield_bonus),
            duration=turns,
            shield_bonus=shield_bonus,
            source=_name_of(card),
            target=_name_of(target, "self"),
        )

    # ==================== 内部 ====================

    def _get_base_damage(self, attacker: Any) -> float:
        damage = getattr(attacker, "damage", None)
        if damage is not None:
            return damage
        attack_power = getattr(attacker, "attack_power", None)
        if attack_power is not None:
            return attack_power
        logger.warning("Attacker has no damage or attack_power, using 1")
        return 1

    def _defense_reduction(self, defender: Any) -> float:
        return defense_reduction(
            getattr(defender, "defense", 0) or 0, cap=self.config.max_defense_reduction,
        )
