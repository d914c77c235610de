# -*- coding: utf-8 -*-
"""
持续伤害 (DoT) 模块
负责持续伤害效果的叠层、刷新与结算

每个目标持有一个 DoTManager，同类型 DoT 只保留一个实例：
可叠层的类型增加层数并刷新持续时间，不可叠层的类型只刷新持续时间。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from ..events import EventEmitter, EventType

logger = logging.getLogger(__name__)


class DoTType(Enum):
    """持续伤害类型枚举"""

    POISON = "poison"
    BURN = "burn"
    BLEED = "bleed"
    FROST = "frost"
    DECAY = "decay"
    WILD = "wild"  # 自然系


@dataclass(frozen=True)
class DoTSpec:
    """DoT 类型的静态配置"""

    name: str
    emoji: str
    description: str
    stacks: bool
    max_stacks: int


DOT_SPECS: Dict[DoTType, DoTSpec] = {
    DoTType.POISON: DoTSpec("Poison", "☠️", "Toxic damage over time", True, 5),
    DoTType.BURN: DoTSpec("Burn", "🔥", "Fire damage over time", True, 5),
    DoTType.BLEED: DoTSpec("Bleed", "🩸", "Physical damage over time", True, 3),
    DoTType.FROST: DoTSpec("Frost", "❄️", "Ice damage over time", False, 1),
    DoTType.DECAY: DoTSpec("Decay", "💀", "Dark magic damage over time", True, 3),
    DoTType.WILD: DoTSpec("Wild Growth", "🌿", "Nature damage over time", True, 5),
}


@dataclass
class TickResult:
    """单次结算结果"""
    success: bool
    damage: int = 0
    turns_remaining: int = 0
    is_expired: bool = False
    effect_type: Optional[DoTType] = None
    reason: str = ""


class DoTEffect:
    """
    持续伤害效果

    每次 tick 造成 floor(damage_per_tick * stacks) 伤害并减少一回合。
    """

    def __init__(
        self,
        dot_type: DoTType = DoTType.POISON,
        damage_per_tick: int = 2,
        duration: int = 3,
        source: str = "unknown",
        stacks: int = 1,
        name: Optional[str] = None,
        emoji: Optional[str] = None,
    ):
        spec = DOT_SPECS[dot_type]
        self.dot_type = dot_type
        self.name = name or spec.name
        self.emoji = emoji or spec.emoji
        self.damage_per_tick = damage_per_tick
        self.duration = duration
        self.turns_remaining = duration
        self.source = source
        self.max_stacks = spec.max_stacks
        self.can_stack = spec.stacks
        self.stacks = min(max(stacks, 1), self.max_stacks)
        self.is_active = True
        self.last_tick_damage = 0

    def tick(self, target: Any) -> TickResult:
        """
        结算一次伤害

        Args:
            target: 拥有 hp 属性的目标（可选 is_alive）

        Returns:
            TickResult: 已失效时 success=False, reason="effect_expired"
        """
        if not self.is_active or self.turns_remaining <= 0:
            return TickResult(success=False, reason="effect_expired", effect_type=self.dot_type)

        total_damage = int(self.damage_per_tick * self.stacks)

        if getattr(target, "hp", None) is not None:
            target.hp = max(0, target.hp - total_damage)
            self.last_tick_damage = total_damage
            if target.hp <= 0 and hasattr(target, "is_alive"):
                target.is_alive = False

        self.turns_remaining -= 1
        if self.turns_remaining <= 0:
            self.is_active = False

        logger.debug(
            "%s tick: %d damage (%d turns remaining)",
            self.name, total_damage, self.turns_remaining,
        )

        return TickResult(
            success=True,
            damage=total_damage,
            turns_remaining=self.turns_remaining,
            is_expired=not self.is_active,
            effect_type=self.dot_type,
        )

    def add_stacks(self, amount: int = 1) -> bool:
        """增加层数，成功叠加时刷新持续时间"""
        if not self.can_stack:
            return False

        new_stacks = min(self.stacks + amount, self.max_stacks)
        added = new_stacks - self.stacks
        self.stacks = new_stacks
        if added > 0:
            self.turns_remaining = self.duration
        return added > 0

    def remove_stacks(self, amount: int = 1) -> None:
        """移除层数，归零时失效"""
        self.stacks = max(0, self.stacks - amount)
        if self.stacks <= 0:
            self.is_active = False

    @property
    def total_remaining_damage(self) -> int:
        return self.damage_per_tick * self.stacks * self.turns_remaining

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.dot_type.value,
            "name": self.name,
            "emoji": self.emoji,
            "damage_per_tick": self.damage_per_tick,
            "duration": self.duration,
            "turns_remaining": self.turns_remaining,
            "source": self.source,
            "stacks": self.stacks,
            "max_stacks": self.max_stacks,
            "can_stack": self.can_stack,
            "is_active": self.is_active,
            "total_remaining_damage": self.total_remaining_damage,
        }


@dataclass
class ApplyResult:
    """DoT 施加结果"""
    action: str  # "applied" | "stacked" | "max_stacks" | "refreshed"
    effect: DoTEffect


class DoTManager(EventEmitter):
    """
    DoT 管理器

    管理单个目标身上的全部持续伤害效果。
    """

    def __init__(self, target: Any):
        super().__init__()
        self.target = target
        self.effects: Dict[DoTType, DoTEffect] = {}

    def apply(self, new_effect: DoTEffect) -> ApplyResult:
        """施加 DoT：叠层、刷新或新增"""
        existing = self.effects.get(new_effect.dot_type)

        if existing is not None and existing.can_stack:
            stacked = existing.add_stacks(new_effect.stacks)
            return ApplyResult("stacked" if stacked else "max_stacks", existing)

        if existing is not None:
            existing.turns_remaining = new_effect.duration
            existing.is_active = True
            return ApplyResult("refreshed", existing)

        self.effects[new_effect.dot_type] = new_effect
        logger.info(
            "DoT applied to %s: %s (%d/tick, %d turns)",
            getattr(self.target, "name", "unknown"),
            new_effect.name, new_effect.damage_per_tick, new_effect.duration,
        )
        return ApplyResult("applied", new_effect)

    def process_all(self) -> List[TickResult]:
        """结算全部 DoT，移除已失效的效果"""
        results: List[TickResult] = []
        expired: List[DoTType] = []

        for dot_type, effect in self.effects.items():
            if effect.is_active and effect.turns_remaining > 0:
                result = effect.tick(self.target)
                results.append(result)
                self.emit(
                    EventType.DOT_TICK,
                    name=effect.name,
                    damage=result.damage,
                    turns_remaining=result.turns_remaining,
                )
                if not effect.is_active:
                    expired.append(dot_type)
            else:
                expired.append(dot_type)

        for dot_type in expired:
            del self.effects[dot_type]

        return results

    def get_all_active(self) -> List[DoTEffect]:
        return [e for e in self.effects.values() if e.is_active]

    def total_damage_per_turn(self) -> int:
        return sum(e.damage_per_tick * e.stacks for e in self.get_all_active())

    def remove(self, dot_type: DoTType) -> bool:
        return self.effects.pop(dot_type, None) is not None

    def remove_all(self) -> int:
        """净化全部 DoT，返回移除数量"""
        count = len(self.effects)
        self.effects.clear()
        logger.info("All DoT effects removed: %d cleansed", count)
        return count

    def get_summary(self) -> Dict[str, Any]:
        active = self.get_all_active()
        return {
            "active_count": len(active),
            "total_damage_per_turn": self.total_damage_per_turn(),
            "total_remaining_damage": sum(e.total_remaining_damage for e in active),
            "effects": [e.to_dict() for e in active],
        }


def create_dot(
    dot_type: DoTType,
    damage_per_tick: int,
    duration: int,
    source: str,
    stacks: int = 1,
) -> DoTEffect:
    """便捷构造函数"""
    return DoTEffect(
        dot_type=dot_type,
        damage_per_tick=damage_per_tick,
        duration=duration,
        source=source,
        stacks=stacks,
    )
