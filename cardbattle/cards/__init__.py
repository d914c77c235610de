"""卡牌模块

Card 基类、三个元素系列的具体卡牌以及按名称创建卡牌的注册表。
"""

from .base import Card, EffectDescriptor, ElementalCard, ExecutionResult, ResultReason
from .fire import Combust, Ember, Fireball, FireBlast, Firestorm, Inferno
from .nature import (
    UNDEAD_KEYWORDS,
    BarkSkin,
    Entangle,
    Ironbark,
    Photosynthesis,
    Poison,
    Regrow,
    Sap,
    SeedBomb,
    SolarBeam,
    Thorns,
    is_undead_name,
)
from .registry import CardRegistry, create_default_registry, normalize_card_name
from .water import AquaBlast, Heal, HydroBoost, IceSpike, IceWall, ManaSpring, Purify, Regen

__all__ = [
    # 基类
    'Card', 'ElementalCard', 'EffectDescriptor', 'ExecutionResult', 'ResultReason',
    # 火系
    'FireBlast', 'Fireball', 'Ember', 'Firestorm', 'Inferno', 'Combust',
    # 自然系
    'SolarBeam', 'BarkSkin', 'Thorns', 'Regrow', 'Poison', 'Entangle',
    'Ironbark', 'SeedBomb', 'Sap', 'Photosynthesis',
    'UNDEAD_KEYWORDS', 'is_undead_name',
    # 水系
    'Heal', 'IceSpike', 'ManaSpring', 'Purify', 'IceWall', 'HydroBoost', 'AquaBlast', 'Regen',
    # 注册表
    'CardRegistry', 'create_default_registry', 'normalize_card_name',
]
