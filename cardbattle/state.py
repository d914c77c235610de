# -*- coding: utf-8 -*-
"""
游戏状态模块
单局对战的共享可变上下文：双方生命、法力与玩家状态区

GameState 隐式实现 context.GameContext 协议。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .config import GameConfig, get_config
from .effects.status import StatusEffect
from .enemy import Enemy

logger = logging.getLogger(__name__)


def _clamp(value: float, upper: int) -> int:
    return int(max(0, min(upper, value)))


@dataclass
class GameState:
    """
    游戏状态

    所有生命/法力修改都经由 update_* 方法，保证数值在 [0, max] 内。
    enemy 存在时以其生命值为准，之后 enemy_hp 的变化同步到 enemy.hp。
    """
    player_hp: int = 100
    player_max_hp: int = 100
    player_mana: int = 50
    player_max_mana: int = 50
    enemy_hp: int = 80
    enemy_max_hp: int = 80
    enemy: Optional[Enemy] = None

    turn_count: int = 1
    is_game_over: bool = False

    # 最近一次出牌的记录
    last_damage_dealt: int = 0
    last_damage_taken: int = 0
    is_critical_hit: bool = False

    active_effects: List[StatusEffect] = field(default_factory=list)
    cooldowns: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.enemy is not None:
            self.set_enemy(self.enemy)

    @classmethod
    def from_config(cls, config: Optional[GameConfig] = None,
                    enemy: Optional[Enemy] = None) -> GameState:
        """按配置创建初始状态；给定敌人时以敌人生命为准"""
        cfg = config or get_config()
        state = cls(
            player_hp=cfg.player_start_hp,
            player_max_hp=cfg.player_max_hp,
            player_mana=cfg.player_start_mana,
            player_max_mana=cfg.player_max_mana,
            enemy_hp=cfg.enemy_start_hp,
            enemy_max_hp=cfg.enemy_max_hp,
        )
        if enemy is not None:
            state.set_enemy(enemy)
        return state

    def set_enemy(self, enemy: Enemy) -> None:
        """设置当前敌人，并以其生命值为准"""
        self.enemy = enemy
        self.enemy_hp = enemy.hp
        self.enemy_max_hp = enemy.max_hp

    # ==================== 数值修改 ====================

    def update_player_hp(self, new_hp: float) -> None:
        self.player_hp = _clamp(new_hp, self.player_max_hp)
        logger.debug("Player HP updated: %d/%d", self.player_hp, self.player_max_hp)

    def update_enemy_hp(self, new_hp: float) -> None:
        self.enemy_hp = _clamp(new_hp, self.enemy_max_hp)
        if self.enemy is not None:
            self.enemy.hp = self.enemy_hp
            self.enemy.is_alive = self.enemy_hp > 0
        logger.debug("Enemy HP updated: %d/%d", self.enemy_hp, self.enemy_max_hp)

    def update_player_mana(self, new_mana: float) -> None:
        self.player_mana = _clamp(new_mana, self.player_max_mana)
        logger.debug("Player mana updated: %d/%d", self.player_mana, self.player_max_mana)

    # ==================== 状态效果 ====================

    def add_effect(self, effect: StatusEffect) -> None:
        self.active_effects.append(effect)
        logger.debug("Effect added: %s", effect.name)

    def remove_effect(self, effect_name: str) -> bool:
        """移除第一个同名效果"""
        for i, effect in enumerate(self.active_effects):
            if effect.name == effect_name:
                del self.active_effects[i]
                logger.debug("Effect removed: %s", effect_name)
                return True
        return False

    def has_effect(self, effect_name: str) -> bool:
        return any(e.name == effect_name for e in self.active_effects)

    # ==================== 重置 ====================

    def reset(self, config: Optional[GameConfig] = None) -> None:
        """恢复到配置给定的初始值"""
        cfg = config or get_config()
        self.player_hp = cfg.player_start_hp
        self.player_max_hp = cfg.player_max_hp
        self.player_mana = cfg.player_start_mana
        self.player_max_mana = cfg.player_max_mana
        self.enemy_hp = cfg.enemy_start_hp
        self.enemy_max_hp = cfg.enemy_max_hp
        if self.enemy is not None:
            self.enemy.reset()
            self.set_enemy(self.enemy)
        self.turn_count = 1
        self.is_game_over = False
        self.last_damage_dealt = 0
        self.last_damage_taken = 0
        self.is_critical_hit = False
        self.active_effects = []
        self.cooldowns = {}
        logger.debug("Game state reset to initial values")
