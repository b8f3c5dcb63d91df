"""
Expression evaluator.

Reduces a token sequence to a single float by applying each operator as soon
as its right-hand number arrives. There is no operator precedence:
``2+3*4`` is ``((0+2)+3)*4``.

The accumulator starts at 0.0 with a pending ``+``, so a leading operator acts
on an implicit zero: ``-5+3`` is ``0-5+3``.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, cast

from .errors import CalculatorError, DivisionByZeroError, InvalidOperatorError
from .limits import CalculatorLimits
from .tokenizer import NumberToken, OperatorToken, Token, tokenize

logger = logging.getLogger("rcalc.evaluator")


@dataclass
class EvaluationResult:
    """Result of evaluating a single expression."""

    value: Optional[float]
    """The evaluated value."""

    success: bool
    """Whether evaluation succeeded."""

    error: Optional[str] = None
    """Error message if evaluation failed."""

    exception: Optional[CalculatorError] = None
    """The error raised, for callers that want position context."""


def apply_operation(
    left: float,
    right: float,
    operator: str,
    position: Optional[int] = None,
    source: Optional[str] = None,
) -> float:
    """Applies a single binary operation."""
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        if right == 0.0:
            raise DivisionByZeroError(position, source)
        return left / right

    raise InvalidOperatorError(operator, position, source)


class Evaluator:
    """Folds a token sequence into a float."""

    def __init__(self, source: Optional[str] = None):
        self._source = source

    def evaluate(self, tokens: Sequence[Token]) -> float:
        """Evaluates tokens from a fresh zero accumulator and pending ``+``."""
        accumulator = 0.0
        operator = "+"
        operator_position: Optional[int] = None

        for token in tokens:
            if token.type == "Operator":
                op = cast(OperatorToken, token)
                operator = op.symbol
                operator_position = op.position
            else:
                number = cast(NumberToken, token)
                accumulator = apply_operation(
                    accumulator,
                    number.value,
                    operator,
                    operator_position,
                    self._source,
                )

        return accumulator


def calculate(tokens: Sequence[Token], source: Optional[str] = None) -> float:
    """
    Evaluates a token sequence left to right.

    Args:
        tokens: Tokens produced by the tokenizer
        source: Optional source expression for error reporting

    Returns:
        The final accumulator value

    Raises:
        DivisionByZeroError: If a division has a zero right-hand operand
        InvalidOperatorError: If an operator symbol is not supported
    """
    return Evaluator(source).evaluate(tokens)


def evaluate_expression(
    source: str, limits: Optional[CalculatorLimits] = None
) -> float:
    """Tokenizes and evaluates a whitespace-free expression."""
    tokens = tokenize(source, limits)
    value = calculate(tokens, source)
    logger.debug(
        "expression_evaluated",
        extra={"expression": source, "value": value},
    )
    return value


def try_evaluate(
    source: str, limits: Optional[CalculatorLimits] = None
) -> EvaluationResult:
    """
    Evaluates an expression and reports failure in the result.

    Only calculator errors are captured; anything else propagates.
    """
    try:
        value = evaluate_expression(source, limits)
        return EvaluationResult(value=value, success=True)
    except CalculatorError as error:
        logger.debug(
            "expression_failed",
            extra={"expression": source, "error": error.message},
        )
        return EvaluationResult(
            value=None, success=False, error=error.message, exception=error
        )
