"""状态效果模块

状态效果记录（StatusEffect）与持续伤害结算（DoTEffect / DoTManager）。
"""

from .dot import DOT_SPECS, DoTEffect, DoTManager, DoTType, create_dot
from .status import DEBUFF_NAMES, StatusEffect, StatusEffectType

__all__ = [
    'StatusEffect', 'StatusEffectType', 'DEBUFF_NAMES',
    'DoTEffect', 'DoTManager', 'DoTType', 'DOT_SPECS', 'create_dot',
]
