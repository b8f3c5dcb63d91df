"""
Tests for the interactive loop.
"""

from prompt_toolkit.history import FileHistory, InMemoryHistory

from rcalc.config import CalculatorConfig
from rcalc.repl import BANNER, Repl, create_history, strip_whitespace


def scripted_input(lines, end=EOFError):
    """Returns a read_line callable that replays lines, then raises ``end``."""
    remaining = list(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        if not remaining:
            raise end()
        return remaining.pop(0)

    read_line.prompts = prompts
    return read_line


def run_session(lines, end=EOFError, **config):
    config.setdefault("show_banner", False)
    output = []
    repl = Repl(CalculatorConfig(**config), scripted_input(lines, end), output.append)
    evaluated = repl.run()
    return output, evaluated


class TestProcessLine:
    """Tests for single-line processing."""

    def test_formats_result(self):
        assert Repl().process_line("1e20*1") == "100000000000000000000"

    def test_strips_all_whitespace(self):
        assert Repl().process_line(" 2 +\t3 * 4 ") == "20"

    def test_blank_line(self):
        assert Repl().process_line("   ") is None

    def test_reports_errors(self):
        assert Repl().process_line("5/0") == "Error: Division by zero!"
        assert Repl().process_line("12..3+4") == "Error: Invalid number: 12..3"
        assert Repl().process_line("2x") == "Error: Invalid character: x"

    def test_error_context(self):
        repl = Repl(CalculatorConfig(show_error_context=True))
        assert repl.process_line("1 $") == "Error: Invalid character: $\n  1$\n   ^"

    def test_applies_configured_limits(self):
        repl = Repl(CalculatorConfig(max_expression_length=3))
        assert repl.process_line("1+2+3") == (
            "Error: Limit exceeded: max_expression_length (limit: 3, actual: 5)"
        )


class TestRun:
    """Tests for the read-evaluate-print loop."""

    def test_continues_after_errors(self):
        output, evaluated = run_session(
            ["1 + 2", "", "5/0", "12..3+4", "2+3*4"]
        )
        assert output == [
            "3",
            "Error: Division by zero!",
            "Error: Invalid number: 12..3",
            "20",
        ]
        assert evaluated == 4

    def test_stops_on_keyboard_interrupt(self):
        output, evaluated = run_session(["-5+3"], end=KeyboardInterrupt)
        assert output == ["-2"]
        assert evaluated == 1

    def test_prints_banner(self):
        output, _ = run_session([], show_banner=True)
        assert output == [BANNER]

    def test_uses_configured_prompt(self):
        read_line = scripted_input(["1"])
        Repl(CalculatorConfig(prompt="calc> ", show_banner=False), read_line, print).run()
        assert read_line.prompts == ["calc> ", "calc> "]


class TestHelpers:
    """Tests for REPL helpers."""

    def test_strip_whitespace(self):
        assert strip_whitespace(" 1 +\t2\n") == "1+2"

    def test_in_memory_history_by_default(self):
        assert isinstance(create_history(CalculatorConfig()), InMemoryHistory)

    def test_file_history(self, tmp_path):
        history_file = str(tmp_path / "history")
        history = create_history(CalculatorConfig(history_file=history_file))
        assert isinstance(history, FileHistory)
