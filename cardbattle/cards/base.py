# -*- coding: utf-8 -*-
"""
卡牌基类

所有卡牌共享的身份信息（名称、消耗、表情、效果描述）、运行时标记
（是否在手牌、冷却）以及出牌流程。具体卡牌重写 execute_effect、
可选地重写 can_play 与展示方法。

失败语义：出牌时的一切失败都以 ExecutionResult(success=False, reason=...)
返回，不抛异常，且不修改游戏状态。
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Mapping, Optional

from i18n import t as _t

from ..events import EventBus, EventEmitter, EventType
from ..exceptions import InvalidCardError, raise_if_negative
from ..rng import RandomSource, make_rng, roll

if TYPE_CHECKING:
    from ..context import GameContext
    from ..effects.status import StatusEffect

logger = logging.getLogger(__name__)


class ResultReason(str, Enum):
    """软失败原因码"""

    NO_TARGET = "no_target"
    NO_GAME_STATE = "no_game_state"
    INVALID_CONDITIONS = "invalid_conditions"
    FULL_HEALTH = "full_health"


@dataclass(frozen=True)
class EffectDescriptor:
    """卡牌效果的静态描述（构造后只读）"""

    type: str
    target: str
    value: float
    description: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def get(self, key: str, default: Any = None) -> Any:
        return self.params.get(key, default)


@dataclass
class ExecutionResult:
    """execute_effect 的返回值，调用方消费后即丢弃"""

    success: bool
    reason: str = ""
    message: str = ""
    damage: int = 0
    healing: int = 0
    status_effects: list[StatusEffect] = field(default_factory=list)
    is_critical_hit: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def failure(cls, reason: ResultReason, message: str = "", **details: Any) -> ExecutionResult:
        return cls(success=False, reason=reason, message=message, details=details)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "success": self.success,
            "reason": str(self.reason.value if isinstance(self.reason, ResultReason) else self.reason),
            "message": self.message,
            "damage": self.damage,
            "healing": self.healing,
            "status_effects": [e.to_dict() for e in self.status_effects],
            "is_critical_hit": self.is_critical_hit,
        }
        data.update(self.details)
        return data


class Card(EventEmitter):
    """
    卡牌基类

    cost、效果描述及各类倍率在构造后固定，出牌过程中只修改外部状态。
    """

    # 注册表与 i18n 使用的标识符
    card_id: ClassVar[str] = "card"

    # update_state 允许修改的运行时标记
    RUNTIME_FLAGS: ClassVar[frozenset[str]] = frozenset(
        {"is_playable", "is_in_hand", "is_in_deck", "is_discarded", "cooldown"}
    )

    def __init__(
        self,
        name: str,
        cost: int,
        effect: EffectDescriptor,
        emoji: str,
        *,
        rng: Optional[RandomSource] = None,
        event_bus: Optional[EventBus] = None,
    ):
        """
        Args:
            name: 卡牌名称
            cost: 法力消耗（不可为负）
            effect: 效果描述
            emoji: 表情符号
            rng: 随机源（默认新建 random.Random）
            event_bus: 事件总线（None 表示不发布事件）
        """
        super().__init__()
        if not name:
            raise InvalidCardError(field="name", value=name)
        raise_if_negative(name, "cost", cost)

        self.id = uuid.uuid4().hex[:7]
        self.name = name
        self.emoji = emoji
        self.cost = cost
        self.effect = effect

        self.is_playable = True
        self.is_in_hand = False
        self.is_in_deck = False
        self.is_discarded = False
        self.cooldown = 0

        self.created_timestamp = time.time()
        self.last_used_timestamp: Optional[float] = None

        self.rng: RandomSource = rng or make_rng()
        self.set_event_bus(event_bus)

        logger.debug("Card created: %s (ID: %s)", self.name, self.id)
        self.emit(EventType.CARD_CREATED, card=self)

    # ==================== 出牌流程 ====================

    def can_play(self, game_state: Optional[GameContext]) -> bool:
        """法力足够、在手牌中且不在冷却时可打出"""
        if game_state is None:
            return False
        has_enough_mana = game_state.player_mana >= self.cost
        is_not_on_cooldown = not self.cooldown or self.cooldown <= 0
        return has_enough_mana and self.is_in_hand and is_not_on_cooldown

    def play(self, game_state: Optional[GameContext], target: Any = None) -> ExecutionResult:
        """
        打出卡牌：校验 → 扣除法力 → 执行效果

        校验失败时返回 reason="invalid_conditions"，不扣法力。
        """
        if not self.can_play(game_state):
            logger.warning("Cannot play card: %s. Conditions not met.", self.name)
            self.emit(EventType.CARD_REJECTED, card=self)
            return ExecutionResult.failure(
                ResultReason.INVALID_CONDITIONS,
                _t("card.invalid_conditions", name=self.name),
            )

        game_state.update_player_mana(game_state.player_mana - self.cost)
        self.last_used_timestamp = time.time()

        logger.info("Playing card: %s (Cost: %d mana)", self.name, self.cost)
        self.emit(EventType.CARD_PLAYED, card=self, cost=self.cost)

        return self.execute_effect(game_state, target)

    def execute_effect(self, game_state: Optional[GameContext], target: Any = None) -> ExecutionResult:
        """默认效果：无伤害、无治疗的通用成功结果"""
        logger.debug("Executing default effect for card: %s", self.name)
        return self._succeed(_t("card.default_effect", name=self.name))

    # ==================== 展示 ====================

    def get_display_name(self) -> str:
        return f"{self.name} [{self.cost} mana]"

    def get_stats_string(self) -> str:
        return f"Cost: {self.cost}"

    # ==================== 运行时状态 ====================

    def update_state(self, **changes: Any) -> None:
        """更新运行时标记；身份与数值字段不可修改"""
        unknown = set(changes) - self.RUNTIME_FLAGS
        if unknown:
            raise InvalidCardError(
                card_name=self.name, field=", ".join(sorted(unknown)), value=None
            )
        for key, value in changes.items():
            setattr(self, key, value)
        logger.debug("Card state updated: %s %s", self.name, changes)

    def reset(self) -> None:
        self.is_playable = True
        self.is_in_hand = False
        self.is_in_deck = False
        self.is_discarded = False
        self.cooldown = 0
        self.last_used_timestamp = None
        self.emit(EventType.CARD_RESET, card=self)

    # ==================== 子类工具 ====================

    def _fail(self, reason: ResultReason, message: str = "") -> ExecutionResult:
        """记录并返回软失败"""
        logger.warning("%s effect failed: %s", self.name, reason.value)
        self.emit(EventType.EFFECT_FAILED, card=self, reason=reason.value)
        return ExecutionResult.failure(
            reason, message or _t(f"card.{reason.value}", name=self.name)
        )

    def _succeed(self, message: str, **kwargs: Any) -> ExecutionResult:
        result = ExecutionResult(success=True, message=message, **kwargs)
        self.emit(EventType.EFFECT_EXECUTED, card=self, result=result, message=message)
        return result

    def _roll_crit(self, game_state: GameContext, chance: float) -> bool:
        """暴击判定并记录到游戏状态"""
        is_crit = roll(self.rng, chance)
        game_state.is_critical_hit = is_crit
        if is_crit:
            logger.info("%s critical hit!", self.name)
            self.emit(EventType.CRITICAL_HIT, card=self)
        return is_crit

    def _deal_damage(self, game_state: GameContext, amount: int) -> None:
        game_state.update_enemy_hp(game_state.enemy_hp - amount)
        game_state.last_damage_dealt = amount
        self.emit(EventType.DAMAGE_DEALT, card=self, damage=amount)

    def _heal_player(self, game_state: GameContext, amount: int) -> None:
        game_state.update_player_hp(game_state.player_hp + amount)
        self.emit(EventType.HEALING_DONE, card=self, healing=amount)

    def _apply_to_player(self, game_state: GameContext, effect: StatusEffect) -> None:
        game_state.add_effect(effect)
        self.emit(EventType.STATUS_APPLIED, card=self, effect=effect, target="player")

    @staticmethod
    def _effect_holder(game_state: GameContext, target: Any = None) -> Any:
        """效果承载者：目标自带效果区时取目标，否则取当前敌人"""
        if hasattr(target, "add_effect") and hasattr(target, "get_effect"):
            return target
        return game_state.enemy

    def _apply_to_enemy(self, game_state: GameContext, effect: StatusEffect,
                        target: Any = None) -> bool:
        """施加到目标（或当前敌人）身上，无处承载时返回 False"""
        holder = self._effect_holder(game_state, target)
        if holder is None:
            return False
        applied = holder.add_effect(effect)
        if applied:
            self.emit(EventType.STATUS_APPLIED, card=self, effect=effect, target="enemy")
        return applied

    @staticmethod
    def _has_active_effect(game_state: GameContext, effect_name: str) -> bool:
        return any(e.name == effect_name for e in (game_state.active_effects or []))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, cost={self.cost})"


class ElementalCard(Card):
    """
    元素卡牌

    带有元素、法术类型与施法方式，展示名附带表情符号。
    """

    def __init__(
        self,
        name: str,
        cost: int,
        effect: EffectDescriptor,
        emoji: str,
        *,
        element: str,
        spell_type: str,
        cast_time: str = "instant",
        rng: Optional[RandomSource] = None,
        event_bus: Optional[EventBus] = None,
    ):
        super().__init__(name, cost, effect, emoji, rng=rng, event_bus=event_bus)
        self.element = element
        self.is_elemental = True
        self.spell_type = spell_type
        self.cast_time = cast_time

    def get_display_name(self) -> str:
        return f"{super().get_display_name()} {self.emoji}"

    def _consume_buff(self, game_state: GameContext, effect_name: str) -> Optional[StatusEffect]:
        """取出并移除作用于本元素的下一法术增益，没有时返回 None"""
        for effect in game_state.active_effects or []:
            if effect.name == effect_name and effect.details.get("applies_to") == self.element:
                game_state.remove_effect(effect_name)
                self.emit(EventType.STATUS_REMOVED, card=self, effect=effect, target="player")
                logger.info("%s consumed %s", self.name, effect_name)
                return effect
        return None
