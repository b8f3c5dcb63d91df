"""
Resource limits for tokenizing and evaluating expressions.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import LimitExceededError


@dataclass(frozen=True)
class CalculatorLimits:
    """Calculator limits configuration."""

    # Maximum expression length in characters, after whitespace is removed
    max_expression_length: int = 4096

    # Maximum number of tokens in a single expression
    max_token_count: int = 2048


DEFAULT_CALCULATOR_LIMITS = CalculatorLimits()


def check_expression_length(
    expression: str, limits: Optional[CalculatorLimits] = None
) -> None:
    """Validates that expression length is within limits."""
    limits = limits or DEFAULT_CALCULATOR_LIMITS
    if len(expression) > limits.max_expression_length:
        raise LimitExceededError(
            "max_expression_length", limits.max_expression_length, len(expression)
        )


def check_token_count(count: int, limits: Optional[CalculatorLimits] = None) -> None:
    """Validates the number of tokens produced by the tokenizer."""
    limits = limits or DEFAULT_CALCULATOR_LIMITS
    if count > limits.max_token_count:
        raise LimitExceededError("max_token_count", limits.max_token_count, count)
