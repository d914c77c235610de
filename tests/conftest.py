"""共享测试夹具：固定随机序列、游戏状态与敌人。"""

import sys
from pathlib import Path

import pytest

# 确保可以导入项目模块
sys.path.insert(0, str(Path(__file__).parent.parent))

from cardbattle.config import reset_config
from cardbattle.enemy import Enemy
from cardbattle.events import EventBus
from cardbattle.state import GameState
from i18n import get_locale, set_locale


class FixedRandom:
    """按顺序返回预设值的随机源，耗尽后重复最后一个值。"""

    def __init__(self, *values: float):
        if not values:
            values = (0.5,)
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        index = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[index]


# 常用取值：0.99 不触发任何概率判定，0.5 令 (0.85, 0.30) 浮动系数恰为 1.0
NO_PROC = 0.99
ALWAYS_PROC = 0.0
MID = 0.5


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def enemy():
    return Enemy(name="Goblin", max_hp=80, attack_power=6, emoji="👺")


@pytest.fixture
def skeleton():
    return Enemy(name="Skeleton King", max_hp=80, attack_power=8, emoji="💀")


@pytest.fixture
def state(enemy):
    return GameState(enemy=enemy)


@pytest.fixture
def wounded_state(enemy):
    return GameState(player_hp=50, enemy=enemy)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture(autouse=True)
def _isolate_globals():
    """每个测试后恢复语言与全局配置"""
    original = get_locale()
    set_locale("en_US")
    yield
    set_locale(original)
    reset_config()
