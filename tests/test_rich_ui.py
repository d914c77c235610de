import io

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from conftest import MID, NO_PROC, FixedRandom

from cardbattle.cards import ExecutionResult, ResultReason, SolarBeam, create_default_registry
from ui.rich_ui import CardBattleConsole


def make_ui():
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None, highlight=False)
    return CardBattleConsole(console=console), buffer


def test_render_catalog_rows():
    ui, _ = make_ui()
    table = ui.render_catalog(create_default_registry())
    assert isinstance(table, Table)
    assert table.row_count == 24
    assert len(table.columns) == 6


def test_show_catalog_output():
    ui, buffer = make_ui()
    ui.show_catalog(create_default_registry())
    output = buffer.getvalue()
    assert "Card Catalog" in output
    assert "solar_beam" in output
    assert "SolarBeam" in output
    assert "Nature" in output


def test_render_success_result(state, enemy):
    ui, buffer = make_ui()
    card = SolarBeam(rng=FixedRandom(NO_PROC, MID))
    result = card.execute_effect(state, enemy)
    panel = ui.render_result(card, result, state)
    assert isinstance(panel, Panel)
    ui.show_result(card, result, state)
    output = buffer.getvalue()
    assert "Success" in output
    assert "Damage: 14" in output
    assert "Goblin: 66/80 HP" in output


def test_render_failure_result():
    ui, buffer = make_ui()
    card = SolarBeam()
    ui.show_result(card, ExecutionResult.failure(ResultReason.NO_TARGET, "no target"))
    output = buffer.getvalue()
    assert "Failed (no_target)" in output
    assert "no target" in output


def test_show_error_keeps_brackets():
    ui, buffer = make_ui()
    ui.show_error("[card.meteor]")
    assert "[card.meteor]" in buffer.getvalue()
