"""游戏配置中心 (SSOT - 单一事实来源)

所有可配置的游戏参数应在此定义，支持从环境变量覆盖。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _get_env_float(key: str, default: float) -> float:
    """从环境变量获取浮点数配置"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            pass
    return default


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """从环境变量获取布尔配置"""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    return default


_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class GameConfig:
    """游戏配置类 (不可变)

    所有配置项支持通过环境变量覆盖：
    - CARDBATTLE_PLAYER_MAX_HP: 玩家最大生命值
    - CARDBATTLE_PLAYER_MAX_MANA: 玩家最大法力值
    - CARDBATTLE_ENEMY_MAX_HP: 敌人最大生命值
    - CARDBATTLE_CRIT_CHANCE: 通用暴击概率
    - CARDBATTLE_CRIT_MULTIPLIER: 通用暴击倍率
    - CARDBATTLE_LOCALE: 消息语言
    """
    # ==================== 玩家 ====================
    player_max_hp: int = field(
        default_factory=lambda: _get_env_int("CARDBATTLE_PLAYER_MAX_HP", 100)
    )
    player_start_hp: int = field(
        default_factory=lambda: _get_env_int("CARDBATTLE_PLAYER_START_HP", 100)
    )
    player_max_mana: int = field(
        default_factory=lambda: _get_env_int("CARDBATTLE_PLAYER_MAX_MANA", 50)
    )
    player_start_mana: int = field(
        default_factory=lambda: _get_env_int("CARDBATTLE_PLAYER_START_MANA", 50)
    )

    # ==================== 敌人 ====================
    enemy_max_hp: int = field(
        default_factory=lambda: _get_env_int("CARDBATTLE_ENEMY_MAX_HP", 80)
    )
    enemy_start_hp: int = field(
        default_factory=lambda: _get_env_int("CARDBATTLE_ENEMY_START_HP", 80)
    )

    # ==================== 战斗数值 ====================
    damage_multiplier: float = 1.0
    critical_hit_chance: float = field(
        default_factory=lambda: _get_env_float("CARDBATTLE_CRIT_CHANCE", 0.15)
    )
    critical_hit_multiplier: float = field(
        default_factory=lambda: _get_env_float("CARDBATTLE_CRIT_MULTIPLIER", 1.5)
    )
    max_defense_reduction: float = 0.5

    # ==================== 日志与调试 ====================
    log_level: str = field(
        default_factory=lambda: os.environ.get("CARDBATTLE_LOG_LEVEL", "INFO")
    )
    debug_mode: bool = field(
        default_factory=lambda: _get_env_bool("CARDBATTLE_DEBUG", False)
    )
    locale: str = field(
        default_factory=lambda: os.environ.get("CARDBATTLE_LOCALE", "en_US")
    )

    @classmethod
    def from_env(cls) -> GameConfig:
        """从环境变量创建配置实例"""
        return cls()

    def get(self, key: str, default: object | None = None) -> object:
        """字典风格的访问方法"""
        return getattr(self, key, default)

    def validate(self) -> list[str]:
        """校验配置，返回错误描述列表（为空表示合法）"""
        errors: list[str] = []

        if self.player_max_hp <= 0:
            errors.append(f"player_max_hp must be positive, got {self.player_max_hp}")
        if not 0 < self.player_start_hp <= max(self.player_max_hp, 0):
            errors.append(
                f"player_start_hp must be in (0, player_max_hp], got {self.player_start_hp}"
            )
        if self.player_max_mana < 0:
            errors.append(f"player_max_mana must be >= 0, got {self.player_max_mana}")
        if not 0 <= self.player_start_mana <= max(self.player_max_mana, 0):
            errors.append(
                f"player_start_mana must be in [0, player_max_mana], got {self.player_start_mana}"
            )
        if self.enemy_max_hp <= 0:
            errors.append(f"enemy_max_hp must be positive, got {self.enemy_max_hp}")
        if not 0 < self.enemy_start_hp <= max(self.enemy_max_hp, 0):
            errors.append(
                f"enemy_start_hp must be in (0, enemy_max_hp], got {self.enemy_start_hp}"
            )
        if self.damage_multiplier < 0:
            errors.append(f"damage_multiplier must be >= 0, got {self.damage_multiplier}")
        if not 0.0 <= self.critical_hit_chance <= 1.0:
            errors.append(
                f"critical_hit_chance must be in [0, 1], got {self.critical_hit_chance}"
            )
        if self.critical_hit_multiplier < 1.0:
            errors.append(
                f"critical_hit_multiplier must be >= 1, got {self.critical_hit_multiplier}"
            )
        if not 0.0 <= self.max_defense_reduction <= 1.0:
            errors.append(
                f"max_defense_reduction must be in [0, 1], got {self.max_defense_reduction}"
            )
        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            errors.append(f"log_level must be one of {_VALID_LOG_LEVELS}, got {self.log_level}")
        if self.locale not in ("en_US", "zh_CN"):
            errors.append(f"locale must be en_US or zh_CN, got {self.locale}")

        return errors


# 全局配置单例
_config: GameConfig | None = None


def get_config() -> GameConfig:
    """获取全局配置实例（懒加载）"""
    global _config
    if _config is None:
        _config = GameConfig.from_env()
    return _config


def reset_config() -> None:
    """重置配置（用于测试）"""
    global _config
    _config = None
