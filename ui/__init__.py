# -*- coding: utf-8 -*-
"""
UI模块
提供卡牌图鉴与出牌结果的终端显示
"""

from .rich_ui import CardBattleConsole

__all__ = ['CardBattleConsole']
