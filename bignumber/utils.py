"""String helpers for decimal number literals.

These are the validation and formatting primitives BigNumber is built on:
- is_valid_integer / is_valid_float: grammar checks
- guess_float_precision: count of fractional digits
- remove_leading_zeros: canonical integer part
- round_decimal_string: rounding to a fixed number of fractional digits

All functions operate on plain strings and can be used without BigNumber.
"""

from __future__ import annotations

import re
from decimal import Decimal, localcontext

import structlog

from bignumber.config import RoundingMode, get_format_config
from bignumber.errors import InvalidNumberFormat, InvalidPrecision

logger = structlog.get_logger()

# ASCII digits only; \d would also accept other Unicode digit characters
_INTEGER_PATTERN = re.compile(r"-?[0-9]+")
_FLOAT_PATTERN = re.compile(r"-?[0-9]+\.[0-9]+")

# Zeros at the start of the integer part that are followed by another digit
_LEADING_ZEROS = re.compile(r"^(-?)0+(?=[0-9])")


def is_valid_integer(value: str) -> bool:
    """Check if a string is an integer literal (optional '-', digits).

    Examples:
        >>> is_valid_integer("-42")
        True
        >>> is_valid_integer("4.2")
        False
    """
    return _INTEGER_PATTERN.fullmatch(value) is not None


def is_valid_float(value: str) -> bool:
    """Check if a string is a float literal with digits on both sides of one point.

    Examples:
        >>> is_valid_float("-4.20")
        True
        >>> is_valid_float(".5")
        False
    """
    return _FLOAT_PATTERN.fullmatch(value) is not None


def guess_float_precision(value: str) -> int:
    """Return the number of digits after the decimal point (0 if there is none)."""
    point = value.find(".")
    if point == -1:
        return 0
    return len(value) - point - 1


def remove_leading_zeros(value: str) -> str:
    """Strip superfluous leading zeros, keeping the sign and one integer digit.

    Strings that do not start with a digit (after an optional sign) are
    returned unchanged, so invalid input stays invalid.

    Examples:
        >>> remove_leading_zeros("-007.50")
        '-7.50'
        >>> remove_leading_zeros("000")
        '0'
        >>> remove_leading_zeros("-00.5")
        '-0.5'
    """
    return _LEADING_ZEROS.sub(r"\1", value)


def round_decimal_string(
    value: str,
    precision: int,
    rounding: RoundingMode | str | None = None,
) -> str:
    """Round a decimal literal to exactly `precision` fractional digits.

    Args:
        value: Integer or float literal (e.g. "-1.25")
        precision: Number of fractional digits in the result (>= 0)
        rounding: Rounding mode or its name. Defaults to the configured mode
            (BIGNUMBER_ROUNDING, read at call time; HALF_UP when unset or invalid).

    Returns:
        The rounded literal. Zero results carry no sign ("-0.04" -> "0.0").

    Raises:
        InvalidPrecision: If precision is negative
        InvalidNumberFormat: If value is not a valid literal
        InvalidRoundingMode: If rounding names no known mode
    """
    if precision < 0:
        raise InvalidPrecision(f"Precision must be non-negative, got {precision}")

    value = remove_leading_zeros(value)
    if not (is_valid_integer(value) or is_valid_float(value)):
        raise InvalidNumberFormat(value)

    mode = get_format_config().rounding if rounding is None else RoundingMode.parse(rounding)

    # Enough precision for every integer digit, the requested fraction and a carry
    with localcontext() as ctx:
        ctx.prec = len(value) + precision + 1
        quantum = Decimal(1).scaleb(-precision)
        rounded = Decimal(value).quantize(quantum, rounding=mode.decimal_rounding)

    result = format(rounded, "f")
    if rounded.is_zero() and result.startswith("-"):
        result = result[1:]

    logger.debug(
        "bignumber_rounded",
        value=value,
        precision=precision,
        rounding=mode.value,
        result=result,
    )
    return result
