"""Tests for the main.py inspection CLI."""

import pytest

import main
from cardbattle.config import reset_config
from i18n import set_locale


@pytest.fixture(autouse=True)
def _cli_env(monkeypatch, tmp_path):
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.setenv("CARDBATTLE_LOG_FILE", str(tmp_path / "cli.log"))
    reset_config()


class TestCatalog:
    def test_lists_cards(self, capsys):
        assert main.main(["catalog"]) == 0
        out = capsys.readouterr().out
        assert "solar_beam" in out
        assert "bark_skin" in out
        assert "purify" in out

    def test_locale_flag(self, capsys):
        assert main.main(["--locale", "zh_CN", "catalog"]) == 0
        assert "日光束" in capsys.readouterr().out


class TestCast:
    def test_damage_card(self, capsys):
        code = main.main(["cast", "solar_beam", "--enemy", "Skeleton King", "--seed", "7"])
        assert code == 0
        out = capsys.readouterr().out
        assert "SolarBeam" in out
        assert "Skeleton King" in out

    def test_same_seed_same_output(self, capsys):
        main.main(["cast", "ice_spike", "--seed", "3"])
        first = capsys.readouterr().out
        main.main(["cast", "ice_spike", "--seed", "3"])
        assert capsys.readouterr().out == first

    def test_heal_full_health_fails(self, capsys):
        assert main.main(["cast", "heal"]) == 1
        assert "full_health" in capsys.readouterr().out

    def test_heal_wounded(self, capsys):
        assert main.main(["cast", "Heal", "--player-hp", "40"]) == 0

    def test_unknown_card(self, capsys):
        assert main.main(["cast", "meteor"]) == 2
        assert "meteor" in capsys.readouterr().out


class TestConfigErrors:
    def test_invalid_config_exit_code(self, monkeypatch, capsys, caplog):
        monkeypatch.setenv("CARDBATTLE_CRIT_CHANCE", "3")
        reset_config()
        assert main.main(["catalog"]) == 2
        assert "critical_hit_chance" in capsys.readouterr().out
        assert "Invalid configuration" in caplog.text


class TestParser:
    def test_requires_command(self):
        with pytest.raises(SystemExit):
            main.build_parser().parse_args([])

    def test_help_follows_locale(self, capsys):
        with pytest.raises(SystemExit):
            main.build_parser().parse_args(["cast", "--help"])
        assert "Random seed" in capsys.readouterr().out

        set_locale("zh_CN")
        with pytest.raises(SystemExit):
            main.build_parser().parse_args(["cast", "--help"])
        assert "随机种子" in capsys.readouterr().out
