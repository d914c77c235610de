"""随机源协议

暴击判定、伤害浮动等随机行为统一经由 RandomSource 获取，
测试时可注入固定序列，回放时可注入带种子的 random.Random。
"""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """最小随机源接口，random.Random 隐式实现此协议。"""

    def random(self) -> float:
        """返回 [0, 1) 区间的浮点数。"""
        ...


def make_rng(seed: int | None = None) -> random.Random:
    """创建随机源（seed 为 None 时使用系统熵）"""
    return random.Random(seed)


def roll(rng: RandomSource, chance: float) -> bool:
    """按概率判定，chance <= 0 永不命中"""
    return rng.random() < chance


def variation(rng: RandomSource, low: float, spread: float) -> float:
    """浮动系数 low + r * spread，如 (0.85, 0.30) 即 ±15%"""
    return low + rng.random() * spread
