# -*- coding: utf-8 -*-
"""
Emoji 卡牌对战：卡牌效果库
包含卡牌、状态效果、游戏状态、伤害计算与事件系统
"""

from .cards import (
    Card, ElementalCard, EffectDescriptor, ExecutionResult, ResultReason,
    FireBlast, Fireball, Ember,
    SolarBeam, BarkSkin, Thorns, Regrow, Poison, Entangle,
    Heal, IceSpike, ManaSpring, Purify,
    CardRegistry, create_default_registry,
)
from .config import GameConfig, get_config, reset_config
from .damage_calculator import DamageCalculator
from .effects import StatusEffect, StatusEffectType, DoTEffect, DoTManager, DoTType
from .enemy import Enemy
from .events import EventBus, EventType, GameEvent, EventEmitter
from .state import GameState

__version__ = "1.0.0"

__all__ = [
    # 卡牌系统
    'Card', 'ElementalCard', 'EffectDescriptor', 'ExecutionResult', 'ResultReason',
    'FireBlast', 'Fireball', 'Ember',
    'SolarBeam', 'BarkSkin', 'Thorns', 'Regrow', 'Poison', 'Entangle',
    'Heal', 'IceSpike', 'ManaSpring', 'Purify',
    'CardRegistry', 'create_default_registry',
    # 状态效果
    'StatusEffect', 'StatusEffectType', 'DoTEffect', 'DoTManager', 'DoTType',
    # 游戏状态
    'GameState', 'Enemy', 'DamageCalculator',
    # 配置
    'GameConfig', 'get_config', 'reset_config',
    # 事件系统
    'EventBus', 'EventType', 'GameEvent', 'EventEmitter',
]
