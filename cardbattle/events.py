# -*- coding: utf-8 -*-
"""
事件总线系统
实现观察者模式，作为卡牌效果的可注入观测通道
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Callable
from collections import defaultdict
import logging

logger = logging.getLogger(__name__)


class EventType(Enum):
    """游戏事件类型枚举"""
    # 卡牌相关
    CARD_CREATED = auto()
    CARD_PLAYED = auto()
    CARD_REJECTED = auto()     # can_play 未通过
    CARD_RESET = auto()
    EFFECT_EXECUTED = auto()   # execute_effect 成功
    EFFECT_FAILED = auto()     # execute_effect 软失败

    # 数值相关
    DAMAGE_DEALT = auto()
    HEALING_DONE = auto()
    MANA_CHANGED = auto()
    CRITICAL_HIT = auto()

    # 状态效果
    STATUS_APPLIED = auto()
    STATUS_REMOVED = auto()
    DOT_TICK = auto()

    # 日志
    LOG_MESSAGE = auto()


@dataclass
class GameEvent:
    """
    游戏事件数据类
    携带事件的所有相关信息
    """
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)

    # 事件控制
    cancelled: bool = False

    @property
    def card(self) -> Any:
        return self.data.get('card')

    @property
    def damage(self) -> int:
        return self.data.get('damage', 0)

    @property
    def healing(self) -> int:
        return self.data.get('healing', 0)

    @property
    def message(self) -> str:
        return self.data.get('message', '')

    def cancel(self) -> None:
        """取消事件（阻止后续处理器）"""
        self.cancelled = True


# 事件处理器类型
EventHandler = Callable[[GameEvent], None]


class EventBus:
    """
    事件总线
    负责事件的发布和订阅
    """

    def __init__(self, max_history: int = 100):
        # 事件处理器映射：事件类型 -> 处理器列表
        self._handlers: Dict[EventType, List[tuple[int, EventHandler]]] = defaultdict(list)
        # 全局处理器（监听所有事件）
        self._global_handlers: List[tuple[int, EventHandler]] = []
        self._event_history: List[GameEvent] = []
        self._max_history: int = max_history

    def subscribe(self, event_type: EventType, handler: EventHandler,
                  priority: int = 0) -> None:
        """
        订阅事件

        Args:
            event_type: 事件类型
            handler: 事件处理器
            priority: 优先级（数字越大越先执行）
        """
        self._handlers[event_type].append((priority, handler))
        self._handlers[event_type].sort(key=lambda x: x[0], reverse=True)

    def subscribe_all(self, handler: EventHandler, priority: int = 0) -> None:
        """订阅所有事件"""
        self._global_handlers.append((priority, handler))
        self._global_handlers.sort(key=lambda x: x[0], reverse=True)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """取消订阅"""
        self._handlers[event_type] = [
            (p, h) for p, h in self._handlers[event_type] if h != handler
        ]

    def unsubscribe_all(self, handler: EventHandler) -> None:
        """取消订阅所有事件"""
        self._global_handlers = [
            (p, h) for p, h in self._global_handlers if h != handler
        ]
        for event_type in self._handlers:
            self.unsubscribe(event_type, handler)

    def publish(self, event: GameEvent) -> GameEvent:
        """
        发布事件

        处理器抛出的异常会被记录，不会中断卡牌效果的执行。

        Args:
            event: 游戏事件

        Returns:
            处理后的事件
        """
        self._event_history.append(event)
        if len(self._event_history) > self._max_history:
            self._event_history = self._event_history[-self._max_history:]

        for _, handler in self._global_handlers:
            if event.cancelled:
                break
            try:
                handler(event)
            except Exception:
                logger.exception("EventBus handler failed for %s", event.event_type.name)

        if not event.cancelled:
            for _, handler in self._handlers.get(event.event_type, []):
                if event.cancelled:
                    break
                try:
                    handler(event)
                except Exception:
                    logger.exception("EventBus handler failed for %s", event.event_type.name)

        return event

    def emit(self, event_type: EventType, **kwargs) -> GameEvent:
        """
        快捷发布事件

        Args:
            event_type: 事件类型
            **kwargs: 事件数据

        Returns:
            处理后的事件
        """
        event = GameEvent(event_type=event_type, data=kwargs)
        return self.publish(event)

    def clear(self) -> None:
        """清除所有订阅"""
        self._handlers.clear()
        self._global_handlers.clear()

    def get_history(self, count: int = 10) -> List[GameEvent]:
        """获取最近的事件历史"""
        return self._event_history[-count:]


class EventEmitter:
    """
    事件发射器混入类
    可被其他类继承以获得事件发布能力
    """

    def __init__(self):
        self._event_bus: Optional[EventBus] = None

    def set_event_bus(self, event_bus: Optional[EventBus]) -> None:
        """设置事件总线（None 表示关闭事件发布）"""
        self._event_bus = event_bus

    def emit(self, event_type: EventType, **kwargs) -> Optional[GameEvent]:
        """发布事件"""
        if self._event_bus:
            return self._event_bus.emit(event_type, **kwargs)
        return None

    def emit_log(self, message: str, **kwargs) -> None:
        """发布日志消息"""
        self.emit(EventType.LOG_MESSAGE, message=message, **kwargs)


# 单例事件总线（可选使用）
_global_event_bus: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """获取全局事件总线"""
    global _global_event_bus
    if _global_event_bus is None:
        _global_event_bus = EventBus()
    return _global_event_bus


def reset_event_bus() -> None:
    """重置全局事件总线"""
    global _global_event_bus
    _global_event_bus = None
