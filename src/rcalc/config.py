"""
Configuration for the rcalc command line.

Environment variables:
    RCALC_PROMPT - Prompt shown before each line (default: "> ")
    RCALC_HISTORY_FILE - File that persists line history (default: in memory)
    RCALC_LOG_LEVEL - Log level (debug, info, warning, error)
    RCALC_SHOW_BANNER - Print the banner on startup (default: true)
    RCALC_SHOW_ERROR_CONTEXT - Print a caret under the failing position
    RCALC_MAX_EXPRESSION_LENGTH - Maximum expression length in characters
    RCALC_MAX_TOKEN_COUNT - Maximum number of tokens per expression
"""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .limits import CalculatorLimits
from .util.logging import parse_log_level

ENV_VAR_PROMPT = "RCALC_PROMPT"
ENV_VAR_HISTORY_FILE = "RCALC_HISTORY_FILE"
ENV_VAR_LOG_LEVEL = "RCALC_LOG_LEVEL"
ENV_VAR_SHOW_BANNER = "RCALC_SHOW_BANNER"
ENV_VAR_SHOW_ERROR_CONTEXT = "RCALC_SHOW_ERROR_CONTEXT"
ENV_VAR_MAX_EXPRESSION_LENGTH = "RCALC_MAX_EXPRESSION_LENGTH"
ENV_VAR_MAX_TOKEN_COUNT = "RCALC_MAX_TOKEN_COUNT"

_ENV_FIELDS = {
    ENV_VAR_PROMPT: "prompt",
    ENV_VAR_HISTORY_FILE: "history_file",
    ENV_VAR_LOG_LEVEL: "log_level",
    ENV_VAR_SHOW_BANNER: "show_banner",
    ENV_VAR_SHOW_ERROR_CONTEXT: "show_error_context",
    ENV_VAR_MAX_EXPRESSION_LENGTH: "max_expression_length",
    ENV_VAR_MAX_TOKEN_COUNT: "max_token_count",
}


class CalculatorConfig(BaseModel):
    """Settings for the REPL and one-shot evaluation."""

    model_config = ConfigDict(extra="forbid")

    # Prompt shown before each input line
    prompt: str = "> "

    # History file; None keeps history in memory for the session only
    history_file: Optional[str] = None

    log_level: str = "warning"

    show_banner: bool = True

    # Print the expression with a caret under the failing position
    show_error_context: bool = False

    max_expression_length: int = Field(default=4096, gt=0)

    max_token_count: int = Field(default=2048, gt=0)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        parse_log_level(value)
        return value.strip().lower()

    @field_validator("history_file")
    @classmethod
    def _validate_history_file(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    def limits(self) -> CalculatorLimits:
        """Builds the calculator limits from this configuration."""
        return CalculatorLimits(
            max_expression_length=self.max_expression_length,
            max_token_count=self.max_token_count,
        )


def load_config(
    environ: Optional[Mapping[str, str]] = None, **overrides: Any
) -> CalculatorConfig:
    """
    Loads configuration from environment variables and explicit overrides.

    Args:
        environ: Environment mapping (defaults to ``os.environ``)
        **overrides: Field values that win over the environment; ``None``
            values are ignored

    Raises:
        pydantic.ValidationError: If a value is invalid
    """
    environ = os.environ if environ is None else environ

    candidate: dict[str, Any] = {}
    for env_var, field_name in _ENV_FIELDS.items():
        value = environ.get(env_var)
        if value is not None:
            candidate[field_name] = value

    candidate.update({k: v for k, v in overrides.items() if v is not None})
    return CalculatorConfig.model_validate(candidate)
