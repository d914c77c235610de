"""状态效果记录

卡牌施加到玩家或敌人身上的限时修正（护甲、反伤、持续伤害、眩晕等）。
turns_remaining 的递减由回合逻辑负责，不在本模块。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..exceptions import InvalidEffectError


class StatusEffectType(str, Enum):
    """状态效果类型"""

    DAMAGE_REDUCTION = "damage_reduction"
    REFLECTION = "reflection"
    REGEN = "regen"
    POISON = "poison"
    BURN = "burn"
    CROWD_CONTROL = "crowd_control"
    NATURE_DOT = "nature_dot"
    SHIELD = "shield"
    RETALIATION = "retaliation"
    DAMAGE_BUFF = "damage_buff"
    MANA_REGEN = "mana_regen"


# 可被净化的减益效果名称
DEBUFF_NAMES: frozenset[str] = frozenset(
    {"poison", "burn", "frost", "curse", "weakness", "slow"}
)


@dataclass
class StatusEffect:
    """状态效果数据类"""

    name: str
    effect_type: str
    magnitude: float
    duration: int
    source: str
    emoji: str = ""
    turns_remaining: int | None = None
    stacks: int = 1
    max_stacks: int = 1
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidEffectError(reason="missing_name")
        if self.duration < 0:
            raise InvalidEffectError(effect_name=self.name, reason="negative_duration")
        if isinstance(self.effect_type, StatusEffectType):
            self.effect_type = self.effect_type.value
        if self.turns_remaining is None:
            self.turns_remaining = self.duration

    @property
    def is_expired(self) -> bool:
        return self.turns_remaining is not None and self.turns_remaining <= 0

    @property
    def is_debuff(self) -> bool:
        return self.name.lower() in DEBUFF_NAMES

    def to_dict(self) -> dict[str, Any]:
        """序列化为字典（details 平铺到顶层）"""
        data: dict[str, Any] = {
            "name": self.name,
            "type": self.effect_type,
            "magnitude": self.magnitude,
            "duration": self.duration,
            "turns_remaining": self.turns_remaining,
            "source": self.source,
            "emoji": self.emoji,
            "stacks": self.stacks,
            "max_stacks": self.max_stacks,
        }
        data.update(self.details)
        return data
