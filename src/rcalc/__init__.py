"""
Left-to-right arithmetic calculator with exact decimal output.

Expressions are tokenized into numbers and operators, folded strictly left to
right without operator precedence, and printed as full decimal strings even
when the result would normally be shown in scientific notation.
"""

__version__ = "0.1.0"

from .errors import (
    CalculatorError,
    DivisionByZeroError,
    InvalidCharacterError,
    InvalidNumberError,
    InvalidOperatorError,
    LimitExceededError,
)

# Evaluator
from .evaluator import (
    EvaluationResult,
    Evaluator,
    apply_operation,
    calculate,
    evaluate_expression,
    try_evaluate,
)

# Formatter
from .formatter import format_full_decimal
from .limits import (
    DEFAULT_CALCULATOR_LIMITS,
    CalculatorLimits,
    check_expression_length,
    check_token_count,
)

# Tokenizer
from .tokenizer import (
    NumberToken,
    OperatorToken,
    Token,
    Tokenizer,
    tokenize,
)

__all__ = [
    "__version__",
    # Errors
    "CalculatorError",
    "InvalidCharacterError",
    "InvalidNumberError",
    "InvalidOperatorError",
    "DivisionByZeroError",
    "LimitExceededError",
    # Limits
    "CalculatorLimits",
    "DEFAULT_CALCULATOR_LIMITS",
    "check_expression_length",
    "check_token_count",
    # Tokenizer
    "Token",
    "NumberToken",
    "OperatorToken",
    "Tokenizer",
    "tokenize",
    # Evaluator
    "EvaluationResult",
    "Evaluator",
    "apply_operation",
    "calculate",
    "evaluate_expression",
    "try_evaluate",
    # Formatter
    "format_full_decimal",
]
