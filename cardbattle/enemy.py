# -*- coding: utf-8 -*-
"""
敌人模块
定义卡牌的攻击对象及其状态效果区
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from .effects.status import StatusEffect

logger = logging.getLogger(__name__)


@dataclass
class DamageTaken:
    """受伤结果"""
    damage_taken: int
    remaining_hp: int
    is_dead: bool
    was_critical_hit: bool = False


@dataclass
class Enemy:
    """
    敌人

    hp 在 [0, max_hp] 之间；hp 归零即 is_alive = False。
    防御值按百分比减伤，最多减免 50%。
    """
    name: str
    max_hp: int
    attack_power: int = 0
    emoji: str = "👹"
    defense: int = 0
    element: str = "neutral"
    hp: int = -1
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:7])
    is_alive: bool = True
    is_stunned: bool = False
    active_effects: List[StatusEffect] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.hp < 0:
            self.hp = self.max_hp

    # ==================== 伤害 ====================

    def take_damage(
        self,
        damage: float,
        is_critical_hit: bool = False,
        critical_multiplier: float = 1.5,
        elemental_bonus: float = 1.0,
    ) -> DamageTaken:
        """
        承受伤害

        Args:
            damage: 原始伤害（负数按 0 处理）
            is_critical_hit: 是否暴击
            critical_multiplier: 暴击倍率
            elemental_bonus: 元素克制倍率

        Returns:
            DamageTaken: 实际伤害与剩余生命
        """
        if not self.is_alive:
            return DamageTaken(0, 0, True)

        if damage < 0:
            logger.warning("Invalid damage value %s for %s, using 0", damage, self.name)
            damage = 0

        final = float(damage)
        if self.defense > 0:
            reduction = min(self.defense / 100, 0.5)
            final = max(1.0, final * (1 - reduction))
        if is_critical_hit:
            final *= critical_multiplier
        final *= elemental_bonus

        final_damage = int(final)
        self.hp = max(0, self.hp - final_damage)
        self.is_alive = self.hp > 0

        logger.info("%s took %d damage. HP: %d/%d", self.name, final_damage, self.hp, self.max_hp)
        return DamageTaken(final_damage, self.hp, not self.is_alive, is_critical_hit)

    # ==================== 状态效果 ====================

    def add_effect(self, effect: Optional[StatusEffect]) -> bool:
        """添加状态效果，无效效果被忽略并返回 False"""
        if effect is None or not getattr(effect, "name", ""):
            logger.warning("%s.add_effect: invalid effect %r", self.name, effect)
            return False
        self.active_effects.append(effect)
        logger.info(
            "[Effect] %s applied to %s (%s turns)",
            effect.name, self.name, effect.turns_remaining,
        )
        return True

    def update_effect(self, effect: StatusEffect) -> None:
        """按名称替换已有效果，不存在时添加"""
        for i, existing in enumerate(self.active_effects):
            if existing.name == effect.name:
                self.active_effects[i] = effect
                return
        self.add_effect(effect)

    def remove_effect(self, effect_name: str) -> bool:
        before = len(self.active_effects)
        self.active_effects = [e for e in self.active_effects if e.name != effect_name]
        removed = len(self.active_effects) < before
        if removed:
            logger.info("[Effect] %s removed from %s", effect_name, self.name)
        return removed

    def get_effect(self, effect_name: str) -> Optional[StatusEffect]:
        for effect in self.active_effects:
            if effect.name == effect_name:
                return effect
        return None

    def has_effect(self, effect_name: str) -> bool:
        return self.get_effect(effect_name) is not None

    # ==================== 其它 ====================

    def reset(self) -> None:
        """恢复到初始状态"""
        self.hp = self.max_hp
        self.is_alive = True
        self.is_stunned = False
        self.active_effects = []

    def get_display_name(self) -> str:
        return f"{self.name} [{self.hp}/{self.max_hp} HP]"

    def get_stats_string(self) -> str:
        return f"Attack: {self.attack_power} | Defense: {self.defense}"
