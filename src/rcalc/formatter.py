"""
Exact decimal formatting of floats.

``format_full_decimal`` renders any float as a plain decimal string, never in
scientific notation. Values whose shortest representation needs an exponent
are expanded with integer arithmetic: the mantissa's digits become a Python
``int`` that is scaled by a power of ten or has a decimal point inserted, so no
floating-point multiplication reintroduces rounding error.
"""

import math
from typing import Tuple

# Magnitude band rendered from the shortest round-trip digits
REGULAR_MIN = 1e-6
REGULAR_MAX = 1e16

# Fractional digits kept from a scientific-notation mantissa
MANTISSA_PRECISION = 15


def trim_trailing_zeros(text: str) -> str:
    """Removes trailing fractional zeros and a dangling decimal point."""
    if "." in text:
        text = text.rstrip("0")
        if text.endswith("."):
            text = text[:-1]
    return text


def format_regular_number(value: float) -> str:
    """
    Formats a number in the regular band from its shortest round-trip digits.

    ``repr`` switches to exponent form below 1e-4; those digits are moved
    across the decimal point as they are, without rounding the mantissa.
    """
    text = repr(value)
    if "e" not in text:
        return trim_trailing_zeros(text)

    mantissa, _, exponent = text.partition("e")
    sign = "-" if mantissa.startswith("-") else ""
    int_part, _, frac_part = mantissa.lstrip("-").partition(".")

    digits = int_part + frac_part
    adjusted_exponent = int(exponent) - len(frac_part)

    if adjusted_exponent >= 0:
        result = format_large_number(digits, adjusted_exponent)
    else:
        result = format_small_number(digits, adjusted_exponent)
    return trim_trailing_zeros(sign + result)


def scientific_parts(value: float) -> Tuple[float, int]:
    """
    Splits a float's shortest scientific form into mantissa and exponent.

    >>> scientific_parts(1.5e-7)
    (1.5, -7)
    """
    text = repr(value)
    if "e" not in text:
        # Zero and other regular values have no exponent in their repr
        text = format(value, "e")
    mantissa, _, exponent = text.partition("e")
    return float(mantissa), int(exponent)


def format_large_number(digits: str, exponent: int) -> str:
    """Formats ``digits * 10**exponent`` for a non-negative exponent."""
    return str(int(digits) * 10**exponent)


def format_small_number(digits: str, exponent: int) -> str:
    """Formats ``digits * 10**exponent`` for a negative exponent."""
    shift = -exponent
    result = str(int(digits))

    if shift >= len(result):
        return "0." + "0" * (shift - len(result)) + result

    point = len(result) - shift
    return f"{result[:point]}.{result[point:]}"


def format_with_bigint(mantissa: float, exponent: int) -> str:
    """
    Formats a non-negative ``mantissa * 10**exponent`` exactly.

    The mantissa is rounded to 15 fractional digits, its decimal point is
    removed and the exponent is adjusted by the number of digits moved.
    """
    mantissa_text = trim_trailing_zeros(f"{mantissa:.{MANTISSA_PRECISION}f}")
    int_part, _, frac_part = mantissa_text.partition(".")

    digits = int_part + frac_part
    adjusted_exponent = exponent - len(frac_part)

    if adjusted_exponent >= 0:
        return format_large_number(digits, adjusted_exponent)
    return format_small_number(digits, adjusted_exponent)


def format_full_decimal(value: float) -> str:
    """
    Formats a float as a full decimal string without scientific notation.

    Args:
        value: Any float, including NaN, infinities and signed zero

    Returns:
        ``"NaN"``, ``"Infinity"``, ``"-Infinity"`` or a plain decimal string
        with trailing fractional zeros removed
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    magnitude = abs(value)
    if REGULAR_MIN <= magnitude < REGULAR_MAX:
        return format_regular_number(value)

    mantissa, exponent = scientific_parts(value)

    if mantissa < 0:
        result = "-" + format_with_bigint(-mantissa, exponent)
    else:
        result = format_with_bigint(abs(mantissa), exponent)

    return trim_trailing_zeros(result)
