"""
Tokenizer (lexer) for calculator expressions.

Converts a whitespace-free expression string into number and operator tokens
for the evaluator.
"""

import logging
from dataclasses import dataclass
from typing import List, Literal, Optional, Union

from .errors import InvalidCharacterError, InvalidNumberError
from .limits import CalculatorLimits, check_expression_length, check_token_count

logger = logging.getLogger("rcalc.tokenizer")

OPERATOR_SYMBOLS = ("+", "-", "*", "/")


@dataclass(frozen=True)
class NumberToken:
    """A numeric literal."""

    value: float

    position: int = 0
    """Position of the literal's first character in the source."""

    @property
    def type(self) -> Literal["Number"]:
        return "Number"


@dataclass(frozen=True)
class OperatorToken:
    """A binary operator symbol."""

    symbol: str

    position: int = 0
    """Position of the operator in the source."""

    @property
    def type(self) -> Literal["Operator"]:
        return "Operator"


Token = Union[NumberToken, OperatorToken]


def _is_digit(ch: str) -> bool:
    """Checks if a character is an ASCII digit."""
    return "0" <= ch <= "9"


def _is_number_part(ch: str) -> bool:
    """Checks if a character can be part of a numeric literal."""
    return _is_digit(ch) or ch in (".", "e", "E")


class Tokenizer:
    """Tokenizer for whitespace-free expression strings."""

    def __init__(self, source: str, limits: Optional[CalculatorLimits] = None):
        self._source = source
        self._limits = limits
        self._position = 0
        self._tokens: List[Token] = []
        self._number = ""
        self._number_start = 0

    def tokenize(self) -> List[Token]:
        """Tokenizes the source expression and returns all tokens."""
        check_expression_length(self._source, self._limits)

        while not self._is_at_end():
            self._scan_token()

        self._flush_number()
        check_token_count(len(self._tokens), self._limits)

        logger.debug(
            "expression_tokenized",
            extra={"expression": self._source, "token_count": len(self._tokens)},
        )
        return self._tokens

    def _is_at_end(self) -> bool:
        return self._position >= len(self._source)

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self._source[self._position]

    def _advance(self) -> str:
        ch = self._source[self._position]
        self._position += 1
        return ch

    def _scan_token(self) -> None:
        start_position = self._position
        ch = self._advance()

        if _is_number_part(ch):
            if not self._number:
                self._number_start = start_position
            self._number += ch

            # An exponent marker takes the sign that follows it
            if ch in ("e", "E") and self._peek() in ("+", "-"):
                self._number += self._advance()
            return

        if ch in OPERATOR_SYMBOLS:
            self._flush_number()
            self._tokens.append(OperatorToken(ch, start_position))
            return

        raise InvalidCharacterError(ch, start_position, self._source)

    def _flush_number(self) -> None:
        if not self._number:
            return

        literal = self._number
        self._number = ""
        try:
            value = float(literal)
        except ValueError:
            raise InvalidNumberError(
                literal, self._number_start, self._source
            ) from None

        self._tokens.append(NumberToken(value, self._number_start))


def tokenize(source: str, limits: Optional[CalculatorLimits] = None) -> List[Token]:
    """
    Tokenizes an expression string into tokens.

    Args:
        source: The expression string, with whitespace already removed
        limits: Optional calculator limits

    Returns:
        List of tokens

    Raises:
        InvalidCharacterError: If the expression contains an unknown character
        InvalidNumberError: If a numeric literal does not parse as a float
        LimitExceededError: If the expression or token count is too large
    """
    tokenizer = Tokenizer(source, limits)
    return tokenizer.tokenize()
