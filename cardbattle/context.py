"""GameContext 协议

定义卡牌与游戏状态交互的最小接口。卡牌依赖此 Protocol 而非
GameState 具体类，测试时可替换为轻量 stub。

设计原则:
- 仅暴露卡牌需要的 *最小* 表面积
- 生命/法力的修改通过 update_* 方法进行（由实现方负责截断）
- 使用 typing.Protocol 实现结构子类型化, GameState 无需显式继承
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Protocol,
    runtime_checkable,
)

if TYPE_CHECKING:
    from .effects.status import StatusEffect
    from .enemy import Enemy


@runtime_checkable
class GameContext(Protocol):
    """卡牌与游戏状态交互的最小接口。"""

    # ==================== 数值字段 ====================

    player_hp: int
    player_max_hp: int
    player_mana: int
    player_max_mana: int
    enemy_hp: int
    enemy: Enemy | None
    active_effects: list[StatusEffect]

    # 最近一次出牌的记录
    last_damage_dealt: int
    is_critical_hit: bool

    # ==================== 修改方法 ====================

    def update_player_hp(self, new_hp: float) -> None:
        """设置玩家生命值（截断到 [0, max]）。"""
        ...

    def update_enemy_hp(self, new_hp: float) -> None:
        """设置敌人生命值（截断到 [0, max]）。"""
        ...

    def update_player_mana(self, new_mana: float) -> None:
        """设置玩家法力值（截断到 [0, max]）。"""
        ...

    def add_effect(self, effect: StatusEffect) -> None:
        """向玩家状态区添加效果。"""
        ...

    def remove_effect(self, effect_name: str) -> bool:
        """按名称移除玩家状态区的效果。"""
        ...
