"""
Error types for the calculator.

All calculator errors extend CalculatorError so a driver can report them and
move on to the next expression.
"""

from typing import Optional


class CalculatorError(Exception):
    """
    Base error for anything that aborts a single expression.

    ``position`` indexes the whitespace-free expression, so the caret from
    ``format_with_context`` lines up with what the tokenizer scanned.
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.position = position
        self.expression = expression

    def format_with_context(self) -> str:
        """
        Returns a formatted error message with position context.
        """
        if self.expression is None or self.position is None:
            return self.message

        pointer = " " * self.position + "^"
        return f"{self.message}\n  {self.expression}\n  {pointer}"


class InvalidCharacterError(CalculatorError):
    """
    Error thrown when the input contains a character outside the grammar.
    """

    def __init__(
        self,
        character: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(f"Invalid character: {character}", position, expression)
        self.character = character


class InvalidNumberError(CalculatorError):
    """
    Error thrown when an accumulated numeric literal is not a valid float.
    """

    def __init__(
        self,
        literal: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(f"Invalid number: {literal}", position, expression)
        self.literal = literal


class InvalidOperatorError(CalculatorError):
    """
    Error thrown when the evaluator meets an operator it does not support.
    """

    def __init__(
        self,
        symbol: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(f"Invalid operator: {symbol}", position, expression)
        self.symbol = symbol


class DivisionByZeroError(CalculatorError):
    """
    Error thrown when the right-hand operand of a division is zero.
    """

    def __init__(
        self,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__("Division by zero!", position, expression)


class LimitExceededError(CalculatorError):
    """
    Error thrown when an expression is too long or has too many tokens.
    """

    def __init__(self, limit_name: str, limit: int, actual: int):
        message = f"Limit exceeded: {limit_name} (limit: {limit}, actual: {actual})"
        super().__init__(message)
        self.limit_name = limit_name
        self.limit = limit
        self.actual = actual
