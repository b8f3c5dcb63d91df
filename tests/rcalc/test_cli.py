"""
Tests for the rcalc command line.
"""

import pytest
from click.testing import CliRunner

from rcalc import __version__
from rcalc import cli


@pytest.fixture
def log_levels(monkeypatch):
    levels = []
    monkeypatch.setattr(cli, "enable_logging", lambda log_level: levels.append(log_level))
    return levels


@pytest.fixture
def runner(monkeypatch, log_levels):
    for name in (
        "RCALC_PROMPT",
        "RCALC_HISTORY_FILE",
        "RCALC_LOG_LEVEL",
        "RCALC_SHOW_BANNER",
        "RCALC_SHOW_ERROR_CONTEXT",
        "RCALC_MAX_EXPRESSION_LENGTH",
        "RCALC_MAX_TOKEN_COUNT",
    ):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


class TestOneShot:
    """Tests for evaluating expressions given as arguments."""

    def test_evaluates_expression(self, runner):
        result = runner.invoke(cli.main, ["2+3*4"])
        assert result.exit_code == 0
        assert result.output == "20\n"

    def test_joins_arguments(self, runner):
        result = runner.invoke(cli.main, ["2", "+", "3"])
        assert result.exit_code == 0
        assert result.output == "5\n"

    def test_leading_minus(self, runner):
        result = runner.invoke(cli.main, ["--", "-5+3"])
        assert result.exit_code == 0
        assert result.output == "-2\n"

    def test_prints_exact_decimal(self, runner):
        result = runner.invoke(cli.main, ["1e20"])
        assert result.output == "100000000000000000000\n"

    def test_error_exits_with_status_one(self, runner):
        result = runner.invoke(cli.main, ["5/0"])
        assert result.exit_code == 1
        assert "Error: Division by zero!" in result.output

    def test_error_context(self, runner):
        result = runner.invoke(cli.main, ["--show-error-context", "12$3"])
        assert result.exit_code == 1
        assert "Error: Invalid character: $\n  12$3\n    ^" in result.output

    def test_blank_expression_is_a_usage_error(self, runner):
        result = runner.invoke(cli.main, [" "])
        assert result.exit_code == 2


class TestOptions:
    """Tests for command-line options."""

    def test_version(self, runner):
        result = runner.invoke(cli.main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_configures_logging(self, runner, log_levels):
        result = runner.invoke(cli.main, ["--log-level", "DEBUG", "1+1"])
        assert result.exit_code == 0
        assert log_levels == ["debug"]

    def test_rejects_unknown_log_level(self, runner):
        result = runner.invoke(cli.main, ["--log-level", "verbose", "1+1"])
        assert result.exit_code == 2

    def test_invalid_environment_is_a_usage_error(self, runner, monkeypatch):
        monkeypatch.setenv("RCALC_MAX_TOKEN_COUNT", "0")
        result = runner.invoke(cli.main, ["1+1"])
        assert result.exit_code == 2
        assert "Invalid configuration" in result.output

    def test_environment_limits_apply(self, runner, monkeypatch):
        monkeypatch.setenv("RCALC_MAX_EXPRESSION_LENGTH", "2")
        result = runner.invoke(cli.main, ["1+1"])
        assert result.exit_code == 1
        assert "max_expression_length" in result.output


class TestInteractive:
    """Tests for starting the REPL."""

    def test_starts_repl_without_arguments(self, runner, monkeypatch):
        started = []

        class FakeRepl:
            def __init__(self, config):
                started.append(config)

            def run(self):
                return 0

        monkeypatch.setattr(cli, "Repl", FakeRepl)
        result = runner.invoke(
            cli.main, ["--no-banner", "--history-file", "history.txt"]
        )
        assert result.exit_code == 0
        assert len(started) == 1
        assert started[0].show_banner is False
        assert started[0].history_file == "history.txt"
