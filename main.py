# -*- coding: utf-8 -*-
"""
Emoji 卡牌对战 - 卡牌库查看工具
主程序入口

使用方法:
    python main.py catalog
    python main.py cast solar_beam --enemy "Skeleton King" --seed 42
    python main.py cast heal --player-hp 60 --locale zh_CN

只用于查看卡牌与单次出牌结果，不包含游戏循环。
"""

import argparse
import logging
import sys
from typing import List, Optional

from logging_config import setup_logging

from cardbattle.cards import create_default_registry
from cardbattle.config import get_config
from cardbattle.enemy import Enemy
from cardbattle.exceptions import ConfigurationError, raise_if_invalid_config
from cardbattle.rng import make_rng
from cardbattle.state import GameState
from i18n import set_locale, get_available_locales, t as _t
from ui.rich_ui import CardBattleConsole

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """构建命令行解析器"""
    parser = argparse.ArgumentParser(prog="cardbattle", description=_t("cli.description"))
    parser.add_argument('--locale', choices=get_available_locales(), help=_t("cli.opt.locale"))
    parser.add_argument('-v', '--verbose', action='store_true', help=_t("cli.opt.verbose"))

    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('catalog', help=_t("cli.catalog.help"))

    cast = sub.add_parser('cast', help=_t("cli.cast.help"))
    cast.add_argument('card', help=_t("cli.arg.card"))
    cast.add_argument('--enemy', default='Goblin', help=_t("cli.opt.enemy"))
    cast.add_argument('--seed', type=int, default=None, help=_t("cli.opt.seed"))
    cast.add_argument('--player-hp', type=int, default=None, help=_t("cli.opt.player_hp"))

    return parser


def run_catalog(ui: CardBattleConsole) -> int:
    ui.show_catalog(create_default_registry())
    return 0


def run_cast(ui: CardBattleConsole, args: argparse.Namespace) -> int:
    """在新的游戏状态上打出一张卡牌，成功返回 0"""
    config = get_config()
    registry = create_default_registry()
    if not registry.has(args.card):
        ui.show_error(_t("cli.unknown_card", name=args.card))
        return 2

    card = registry.create(args.card, rng=make_rng(args.seed))
    card.update_state(is_in_hand=True)

    enemy = Enemy(name=args.enemy, max_hp=config.enemy_max_hp)
    state = GameState.from_config(config, enemy=enemy)
    if args.player_hp is not None:
        state.update_player_hp(args.player_hp)

    logger.info("cast %s vs %s (seed=%s)", card.name, enemy.name, args.seed)
    result = card.play(state, target=enemy)
    ui.show_result(card, result, state)
    return 0 if result.success else 1


def main(argv: Optional[List[str]] = None) -> int:
    """程序入口"""
    setup_logging(enable_console=False)

    ui = CardBattleConsole()
    config = get_config()
    try:
        raise_if_invalid_config(config.validate())
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e.errors)
        ui.show_error(_t("cli.config_error", errors="; ".join(e.errors)))
        return 2

    set_locale(config.locale)
    args = build_parser().parse_args(argv)
    if args.locale:
        set_locale(args.locale)
    if args.verbose or config.debug_mode:
        setup_logging(enable_console=True, console_level="DEBUG" if config.debug_mode else "INFO")

    try:
        if args.command == 'catalog':
            return run_catalog(ui)
        return run_cast(ui, args)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt - exiting")
        print(_t("main.interrupted"))
        return 130
    except Exception as e:
        logger.exception("Unhandled exception")
        ui.show_error(_t("main.error", error=e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
