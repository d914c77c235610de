# -*- coding: utf-8 -*-
"""
卡牌注册表
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Optional

from ..exceptions import CardNotFoundError
from .base import Card

logger = logging.getLogger(__name__)

CardFactory = Callable[..., Card]


def normalize_card_name(name: str) -> str:
    """名称归一化：SolarBeam、solar_beam、Solar Beam 视为同一名称"""
    return name.strip().lower().replace(" ", "").replace("_", "").replace("-", "")


class CardRegistry:
    """
    卡牌注册表

    按卡牌标识映射到卡牌工厂（通常是卡牌类本身），
    create() 每次返回一张新卡牌。
    """

    def __init__(self):
        self._factories: Dict[str, CardFactory] = {}
        self._ids: Dict[str, str] = {}

    def register(self, card_id: str, factory: CardFactory) -> None:
        """注册卡牌工厂，同名注册会覆盖"""
        key = normalize_card_name(card_id)
        if key in self._factories:
            logger.debug("Overriding registered card: %s", card_id)
        self._factories[key] = factory
        self._ids[key] = card_id

    def register_class(self, card_cls: type[Card]) -> None:
        """以类属性 card_id 注册卡牌类"""
        self.register(card_cls.card_id, card_cls)

    def get(self, name: str) -> Optional[CardFactory]:
        """获取卡牌工厂，不存在时返回 None"""
        return self._factories.get(normalize_card_name(name))

    def has(self, name: str) -> bool:
        """检查是否注册了对应卡牌"""
        return normalize_card_name(name) in self._factories

    def create(self, name: str, **kwargs: Any) -> Card:
        """
        创建卡牌

        Raises:
            CardNotFoundError: 未注册的卡牌名称
        """
        factory = self.get(name)
        if factory is None:
            raise CardNotFoundError(card_name=name)
        return factory(**kwargs)

    def names(self) -> List[str]:
        """按注册顺序返回卡牌标识"""
        return list(self._ids.values())

    def __len__(self) -> int:
        return len(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)


def create_default_registry() -> CardRegistry:
    """
    创建并注册所有默认卡牌

    Returns:
        已注册所有卡牌的注册表
    """
    from .fire import Combust, Ember, Fireball, FireBlast, Firestorm, Inferno
    from .nature import (
        BarkSkin, Entangle, Ironbark, Photosynthesis, Poison, Regrow, Sap, SeedBomb,
        SolarBeam, Thorns,
    )
    from .water import AquaBlast, Heal, HydroBoost, IceSpike, IceWall, ManaSpring, Purify, Regen

    registry = CardRegistry()

    # 火系
    for card_cls in (FireBlast, Fireball, Ember, Firestorm, Inferno, Combust):
        registry.register_class(card_cls)

    # 自然系
    for card_cls in (SolarBeam, BarkSkin, Thorns, Regrow, Poison, Entangle,
                     Ironbark, SeedBomb, Sap, Photosynthesis):
        registry.register_class(card_cls)

    # 水系
    for card_cls in (Heal, IceSpike, ManaSpring, Purify, IceWall, HydroBoost, AquaBlast, Regen):
        registry.register_class(card_cls)

    return registry
