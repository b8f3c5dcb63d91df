"""
rcalc command line.

Usage:
    rcalc                 start the interactive calculator
    rcalc 2 + 3 '*' 4     evaluate one expression and exit
    python -m rcalc ...
"""

from __future__ import annotations

from typing import Optional, Tuple

import click
from pydantic import ValidationError

from . import __version__
from .config import load_config
from .evaluator import try_evaluate
from .formatter import format_full_decimal
from .repl import Repl, strip_whitespace
from .util.logging import LOG_LEVELS, enable_logging


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("expression", nargs=-1)
@click.option(
    "--history-file",
    type=click.Path(dir_okay=False),
    help="Persist line history to this file.",
)
@click.option(
    "--log-level",
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    help="Log level for diagnostics written to stderr.",
)
@click.option("--no-banner", is_flag=True, help="Do not print the startup banner.")
@click.option(
    "--show-error-context",
    is_flag=True,
    help="Show the expression with a caret under the failing position.",
)
@click.version_option(__version__, prog_name="rcalc")
def main(
    expression: Tuple[str, ...],
    history_file: Optional[str],
    log_level: Optional[str],
    no_banner: bool,
    show_error_context: bool,
) -> None:
    """Evaluate arithmetic expressions left to right and print exact decimals."""
    try:
        config = load_config(
            history_file=history_file,
            log_level=log_level,
            show_banner=False if no_banner else None,
            show_error_context=True if show_error_context else None,
        )
    except ValidationError as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e

    enable_logging(log_level=config.log_level)

    if not expression:
        Repl(config).run()
        return

    source = strip_whitespace("".join(expression))
    if not source:
        raise click.UsageError("Empty expression")

    result = try_evaluate(source, config.limits())
    if not result.success or result.value is None:
        message = result.error
        if config.show_error_context and result.exception is not None:
            message = result.exception.format_with_context()
        click.echo(f"Error: {message}", err=True)
        raise SystemExit(1)

    click.echo(format_full_decimal(result.value))


if __name__ == "__main__":
    main()
