"""
Interactive read-evaluate-print loop.

Each line has its whitespace removed and is evaluated independently; errors
are printed as ``Error: <message>`` and the loop carries on with the next
line. The loop ends on end-of-file or Ctrl+C.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import click
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, History, InMemoryHistory

from .config import CalculatorConfig
from .evaluator import try_evaluate
from .formatter import format_full_decimal

logger = logging.getLogger("rcalc.repl")

BANNER = (
    "rcalc - Python Calculator\n"
    "Enter expressions like '123+456' or '123*1e6'\n"
    "Press Ctrl+C to exit"
)


def strip_whitespace(line: str) -> str:
    """Removes every whitespace character from a line."""
    return "".join(line.split())


def create_history(config: CalculatorConfig) -> History:
    if config.history_file:
        return FileHistory(config.history_file)
    return InMemoryHistory()


class Repl:
    """Line-oriented calculator session."""

    def __init__(
        self,
        config: Optional[CalculatorConfig] = None,
        read_line: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ):
        self._config = config or CalculatorConfig()
        self._limits = self._config.limits()
        self._read_line = read_line
        self._write = write or click.echo

    def _prompt(self) -> str:
        if self._read_line is None:
            session: PromptSession[str] = PromptSession(
                history=create_history(self._config)
            )
            self._read_line = session.prompt
        return self._read_line(self._config.prompt)

    def process_line(self, line: str) -> Optional[str]:
        """
        Evaluates one raw input line.

        Returns:
            The text to print, or None when the line is blank
        """
        expression = strip_whitespace(line)
        if not expression:
            return None

        result = try_evaluate(expression, self._limits)
        if result.success and result.value is not None:
            return format_full_decimal(result.value)

        if self._config.show_error_context and result.exception is not None:
            return f"Error: {result.exception.format_with_context()}"
        return f"Error: {result.error}"

    def run(self) -> int:
        """Runs the loop until input ends; returns the number of lines evaluated."""
        if self._config.show_banner:
            self._write(BANNER)

        logger.info("repl_started", extra={"history_file": self._config.history_file})

        evaluated = 0
        while True:
            try:
                line = self._prompt()
            except (EOFError, KeyboardInterrupt):
                break

            output = self.process_line(line)
            if output is None:
                continue

            evaluated += 1
            self._write(output)

        logger.info("repl_stopped", extra={"evaluated": evaluated})
        return evaluated
