"""Tests for CLI commands."""

import logging

from click.testing import CliRunner
import pytest

from disjoint_forest.cli import main


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


def test_main_help(runner):
    """Test main help command."""
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Disjoint-Set Forest Toolkit" in result.output


def test_version(runner):
    """Test version command."""
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_components_help(runner):
    """Test components help command."""
    result = runner.invoke(main, ["components", "--help"])
    assert result.exit_code == 0
    assert "Find connected components" in result.output


def test_mst_help(runner):
    """Test mst help command."""
    result = runner.invoke(main, ["mst", "--help"])
    assert result.exit_code == 0
    assert "minimum spanning forest" in result.output


def test_run_help(runner):
    """Test run help command."""
    result = runner.invoke(main, ["run", "--help"])
    assert result.exit_code == 0
    assert "Run one or more registered analyses" in result.output
    assert "--analysis" in result.output


def test_demo_help(runner):
    """Test demo help command."""
    result = runner.invoke(main, ["demo", "--help"])
    assert result.exit_code == 0
    assert "Walk through unify operations" in result.output


def test_verbose_sets_debug_level(runner):
    """Test --verbose enables debug logging."""
    result = runner.invoke(main, ["--verbose", "demo"])
    assert result.exit_code == 0
    assert logging.getLogger().level == logging.DEBUG


def test_missing_config_file(runner):
    """Test a nonexistent --config path is rejected."""
    result = runner.invoke(main, ["--config", "missing.json", "demo"])
    assert result.exit_code != 0


def test_malformed_config_file(runner, tmp_path):
    """Test a config file that is not valid JSON reports an error line."""
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json")

    result = runner.invoke(main, ["--config", str(config_path), "demo"])

    assert result.exit_code != 0
    assert "Error:" in result.output
    assert "Final set count" not in result.output


def test_invalid_config_value(runner, tmp_path):
    """Test a config value rejected by validation reports an error line."""
    config_path = tmp_path / "config.json"
    config_path.write_text('{"graph": {"max_rows_displayed": 0}}')

    result = runner.invoke(main, ["--config", str(config_path), "demo"])

    assert result.exit_code != 0
    assert "Error:" in result.output
    assert "max_rows_displayed" in result.output
