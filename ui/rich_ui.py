# -*- coding: utf-8 -*-
"""
Rich Console Module
Renders the card catalog and card results with the 'rich' library.
Inspection output only; there is no game loop here.
"""

from typing import Optional, TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.box import ROUNDED

from i18n import t as _t, card_name, element_name

if TYPE_CHECKING:
    from cardbattle.cards import Card, CardRegistry, ExecutionResult
    from cardbattle.state import GameState

# Element -> rich style
ELEMENT_STYLES = {
    "fire": "bold red",
    "nature": "bold green",
    "water": "bold blue",
    "ice": "bold cyan",
    "neutral": "white",
}


class CardBattleConsole:
    """
    Rich console for the card library.
    Tables and panels are built separately from printing so tests can inspect them.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def _element_style(self, element: str) -> str:
        return ELEMENT_STYLES.get(element, "white")

    # --- Catalog ---

    def render_catalog(self, registry: 'CardRegistry') -> Table:
        table = Table(title=_t("cli.catalog.title"), box=ROUNDED)
        table.add_column(_t("cli.col.id"), style="dim")
        table.add_column(_t("cli.col.name"))
        table.add_column(_t("cli.col.element"))
        table.add_column(_t("cli.col.cost"), justify="right", style="magenta")
        table.add_column(_t("cli.col.stats"), style="yellow")
        table.add_column(_t("cli.col.description"))

        for card_id in registry.names():
            card = registry.create(card_id)
            element = getattr(card, "element", "neutral")
            table.add_row(
                card_id,
                f"{card.emoji} {card_name(card_id)}",
                Text(element_name(element), style=self._element_style(element)),
                str(card.cost),
                card.get_stats_string(),
                card.effect.description,
            )
        return table

    def show_catalog(self, registry: 'CardRegistry') -> None:
        self.console.print(self.render_catalog(registry))

    # --- Results ---

    def render_result(self, card: 'Card', result: 'ExecutionResult',
                      state: Optional['GameState'] = None) -> Panel:
        lines = Text()
        if result.success:
            lines.append(_t("cli.cast.success"), style="bold green")
        else:
            reason = getattr(result.reason, "value", result.reason)
            lines.append(_t("cli.cast.failure", reason=reason), style="bold red")
        lines.append("\n")
        if result.message:
            lines.append(result.message + "\n")

        if result.damage:
            lines.append(_t("cli.cast.damage", damage=result.damage) + "\n", style="red")
        if result.healing:
            lines.append(_t("cli.cast.healing", healing=result.healing) + "\n", style="green")
        if result.is_critical_hit:
            lines.append(_t("cli.cast.critical") + "\n", style="bold yellow")
        if result.status_effects:
            effects = ", ".join(f"{e.emoji} {e.name}" for e in result.status_effects)
            lines.append(_t("cli.cast.effects", effects=effects) + "\n", style="cyan")

        if state is not None:
            lines.append(_t(
                "cli.cast.player",
                hp=state.player_hp, max_hp=state.player_max_hp,
                mana=state.player_mana, max_mana=state.player_max_mana,
            ) + "\n", style="dim")
            if state.enemy is not None:
                lines.append(_t(
                    "cli.cast.enemy",
                    name=state.enemy.name, hp=state.enemy_hp, max_hp=state.enemy_max_hp,
                ), style="dim")

        enemy = state.enemy.name if state is not None and state.enemy is not None else "-"
        return Panel(
            lines,
            title=Text(_t("cli.cast.title", card=card.get_display_name(), enemy=enemy)),
            border_style=self._element_style(getattr(card, "element", "neutral")),
            box=ROUNDED,
        )

    def show_result(self, card: 'Card', result: 'ExecutionResult',
                    state: Optional['GameState'] = None) -> None:
        self.console.print(self.render_result(card, result, state))

    def show_error(self, message: str) -> None:
        self.console.print(Text(message, style="red"))
