"""Tests for src/dicemath/cli/main.py."""
from __future__ import annotations

import json
import logging

import pytest
from typer.testing import CliRunner

from dicemath.cli.main import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[engine]\nwarm_dice = 5\nmax_dice = 100\n[display]\nprecision = 4\nshow_distribution = true\n")
    return path


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCalc:
    def test_summary(self, runner, config_file):
        result = runner.invoke(app, ["calc", "-r", "2", "-b", "1", "-d", "1", "--config", str(config_file)])
        assert result.exit_code == 0
        assert "Average damage" in result.output
        assert "0.9583" in result.output
        assert "37.50%" in result.output
        assert "Damage distribution" in result.output

    def test_hide_distribution(self, runner, config_file):
        result = runner.invoke(app, ["calc", "-r", "2", "-b", "1", "-d", "1", "--hide-dist", "--config", str(config_file)])
        assert result.exit_code == 0
        assert "Damage distribution" not in result.output

    def test_json(self, runner, config_file):
        result = runner.invoke(app, ["calc", "-r", "2", "-b", "1", "-d", "1", "--json", "--config", str(config_file)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["hitChance"] == pytest.approx(0.375)
        assert data["averageDamage"] == pytest.approx(207 / 216)
        assert data["crushed"][0][0] == 0

    def test_verbose_logs_stages(self, runner, config_file, restore_root_logger):
        result = runner.invoke(app, ["calc", "-d", "2", "-v", "--hide-dist", "--config", str(config_file)])
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG


class TestDist:
    def test_two_dice(self, runner, config_file):
        result = runner.invoke(app, ["dist", "2", "--config", str(config_file)])
        assert result.exit_code == 0
        assert "2d6" in result.output
        assert "7.0000" in result.output
        assert "Outcomes:" in result.output

    def test_zero_dice(self, runner, config_file):
        result = runner.invoke(app, ["dist", "0", "--config", str(config_file)])
        assert result.exit_code == 0
        assert "Outcomes: 1" in result.output
