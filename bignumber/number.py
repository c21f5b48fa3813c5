"""Arbitrary-precision decimal number.

BigNumber stores a decimal value as an unbounded signed integer (the
magnitude, with the decimal point removed) plus a scale (how many of the
magnitude's digits are fractional):

    "-12.345"  ->  magnitude=-12345, scale=3

The value is always magnitude / 10**scale. Comparisons raise both operands to
a common scale and compare the integers, so no float conversion ever happens.

Usage:
    from bignumber import BigNumber

    price = BigNumber("1.5")
    price.is_equal("1.50")          # True
    price.less_than("1.500001")     # True
    BigNumber("3").to_fixed(2)      # "3.00"
    BigNumber("1.249").to_fixed(1, should_round=False)  # "1.2"

Instances are immutable: with_number() returns a new BigNumber instead of
updating the existing one.
"""

from __future__ import annotations

import math
from decimal import Decimal

import structlog

from bignumber.config import RoundingMode
from bignumber.errors import InvalidInputType, InvalidNumberFormat, InvalidPrecision
from bignumber.utils import (
    guess_float_precision,
    is_valid_float,
    is_valid_integer,
    remove_leading_zeros,
    round_decimal_string,
)

logger = structlog.get_logger()

# Input kinds accepted by the constructor
NumberParam = int | float | Decimal | str

# int <-> str conversions are done in chunks below CPython's default
# int_max_str_digits limit (4300) so magnitudes stay unbounded
_CHUNK_DIGITS = 4000
_CHUNK_BASE = 10**_CHUNK_DIGITS


def _digits_to_int(digits: str) -> int:
    """Parse an optionally '-'-prefixed run of ASCII digits of any length."""
    negative = digits.startswith("-")
    body = digits[1:] if negative else digits
    if len(body) <= _CHUNK_DIGITS:
        return int(digits)

    result = 0
    for start in range(0, len(body), _CHUNK_DIGITS):
        chunk = body[start : start + _CHUNK_DIGITS]
        result = result * 10 ** len(chunk) + int(chunk)
    return -result if negative else result


def _int_to_digits(value: int) -> str:
    """Render a non-negative int of any size as decimal digits."""
    if value < _CHUNK_BASE:
        return str(value)

    chunks = []
    while value:
        value, remainder = divmod(value, _CHUNK_BASE)
        chunks.append(str(remainder).zfill(_CHUNK_DIGITS))
    chunks[-1] = chunks[-1].lstrip("0")
    return "".join(reversed(chunks))


def _int_to_string(value: int) -> str:
    if value < 0:
        return "-" + _int_to_digits(-value)
    return _int_to_digits(value)


def _float_to_string(value: float) -> str:
    """Shortest round-tripping decimal form of a float, never in exponent notation.

    float.__repr__ is called directly so subclasses with their own repr
    (e.g. numpy.float64) still render as plain digits.
    """
    text = float.__repr__(value)
    if math.isfinite(value) and ("e" in text or "E" in text):
        text = format(Decimal(text), "f")
    return text


def _parse_string(value: str) -> tuple[int, int]:
    """Parse a decimal literal into (magnitude, scale).

    Raises:
        InvalidNumberFormat: If the literal is neither an integer nor a float
    """
    normalized = remove_leading_zeros(value)

    if is_valid_integer(normalized):
        return _digits_to_int(normalized), 0

    if is_valid_float(normalized):
        scale = guess_float_precision(normalized)
        return _digits_to_int(normalized.replace(".", "", 1)), scale

    logger.debug("bignumber_invalid_format", value=value)
    raise InvalidNumberFormat(value)


def _parse(value: object) -> tuple[int, int]:
    """Resolve any accepted input kind into (magnitude, scale).

    Raises:
        InvalidInputType: If value is not a BigNumber, int, float, Decimal or str
        InvalidNumberFormat: If a float, Decimal or str does not form a valid literal
    """
    if isinstance(value, BigNumber):
        return value._magnitude, value._scale
    if isinstance(value, int) and not isinstance(value, bool):
        return int(value), 0
    if isinstance(value, float):
        return _parse_string(_float_to_string(value))
    if isinstance(value, Decimal):
        return _parse_string(format(value, "f"))
    if isinstance(value, str):
        return _parse_string(value)

    type_name = type(value).__name__
    logger.debug("bignumber_invalid_input_type", type_name=type_name)
    raise InvalidInputType(type_name)


def _is_orderable(value: object) -> bool:
    """True for operands the ordering operators accept."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (BigNumber, int, float, Decimal))


def _non_finite_sign(value: object) -> int | None:
    """Sign of an infinite float or Decimal, 0 for NaN, None for anything finite."""
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return 1 if value > 0 else -1
    elif isinstance(value, Decimal):
        if value.is_nan():
            return 0
        if value.is_infinite():
            return -1 if value.is_signed() else 1
    return None


class BigNumber:
    """Immutable decimal number with an arbitrary-precision integer magnitude.

    Attributes:
        magnitude: The value with the decimal point removed (read-only)
        scale: Number of fractional digits in magnitude (read-only, >= 0)

    Ordering operators also accept float and Decimal (infinities compare by sign,
    NaN compares False), but == only matches BigNumber and int, so
    BigNumber(2) == 2.0 is False while BigNumber(2) <= 2.0 is True.
    """

    __slots__ = ("_magnitude", "_scale")
    _magnitude: int
    _scale: int

    def __init__(self, value: NumberParam | BigNumber) -> None:
        """Create a BigNumber from an int, float, Decimal, str or another BigNumber.

        Args:
            value: ints are taken as-is with scale 0. floats and Decimals are
                converted to their positional decimal string first. Strings may
                carry leading zeros but must otherwise be "-?digits" or
                "-?digits.digits".

        Raises:
            InvalidInputType: If value is of any other type
            InvalidNumberFormat: If value does not form a valid decimal literal
        """
        self._magnitude, self._scale = _parse(value)

    @classmethod
    def from_parts(cls, magnitude: int, scale: int = 0) -> BigNumber:
        """Create directly from a magnitude and scale.

        Example: from_parts(-12345, 3) is -12.345

        Raises:
            InvalidInputType: If magnitude is not an int
            InvalidPrecision: If scale is not a non-negative int
        """
        if isinstance(magnitude, bool) or not isinstance(magnitude, int):
            raise InvalidInputType(type(magnitude).__name__)
        if isinstance(scale, bool) or not isinstance(scale, int) or scale < 0:
            raise InvalidPrecision(f"Scale must be a non-negative int, got {scale!r}")
        number = cls.__new__(cls)
        number._magnitude = int(magnitude)
        number._scale = scale
        return number

    def with_number(self, value: NumberParam | BigNumber) -> BigNumber:
        """Return a new BigNumber for value; this instance is left unchanged."""
        return type(self)(value)

    @property
    def magnitude(self) -> int:
        """The value with the decimal point removed."""
        return self._magnitude

    @property
    def scale(self) -> int:
        """Number of fractional digits implied by the magnitude."""
        return self._scale

    # --- Formatting ---

    def __str__(self) -> str:
        if self._scale == 0:
            return _int_to_string(self._magnitude)

        # Pad so at least one digit remains left of the point
        digits = _int_to_digits(abs(self._magnitude)).rjust(self._scale + 1, "0")
        integer_part = remove_leading_zeros(digits[: -self._scale])
        text = f"{integer_part}.{digits[-self._scale :]}"
        return f"-{text}" if self._magnitude < 0 else text

    def __repr__(self) -> str:
        return f"BigNumber('{self}')"

    def to_string(self) -> str:
        """Canonical decimal string, keeping every fractional digit of the scale."""
        return str(self)

    def to_json(self) -> str:
        """JSON representation: the decimal string, never a float or the raw magnitude."""
        return str(self)

    def to_fixed(
        self,
        precision: int = 0,
        should_round: bool = True,
        rounding: RoundingMode | str | None = None,
    ) -> str:
        """Render with exactly `precision` fractional digits.

        Extra digits are zero-padded. Surplus digits are rounded (using
        `rounding`, or the configured default mode) or, with
        should_round=False, truncated toward zero.

        Examples:
            BigNumber("3").to_fixed(2)                        -> "3.00"
            BigNumber("1.25").to_fixed(1)                     -> "1.3"
            BigNumber("1.249").to_fixed(1, should_round=False) -> "1.2"
            BigNumber("1.5").to_fixed(0, should_round=False)   -> "1"

        Raises:
            InvalidPrecision: If precision is not a non-negative int
        """
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise InvalidPrecision(f"Precision must be a non-negative int, got {precision!r}")

        diff = precision - self._scale
        if diff > 0:
            text = str(self)
            if "." not in text:
                text += "."
            return text + "0" * diff
        if diff < 0:
            if should_round:
                return round_decimal_string(str(self), precision, rounding)
            return str(self._truncate(precision))
        return str(self)

    def _truncate(self, precision: int) -> BigNumber:
        """Drop fractional digits beyond precision, rounding toward zero."""
        quotient = abs(self._magnitude) // 10 ** (self._scale - precision)
        if self._magnitude < 0:
            quotient = -quotient
        return BigNumber.from_parts(quotient, precision)

    # --- Comparison ---

    def _aligned(self, other: NumberParam | BigNumber) -> tuple[int, int]:
        """Return (this, that) magnitudes raised to a common scale."""
        that = other if isinstance(other, BigNumber) else BigNumber(other)

        this_num = self._magnitude
        that_num = that._magnitude
        diff = self._scale - that._scale
        if diff > 0:
            that_num *= 10**diff
        elif diff < 0:
            this_num *= 10**-diff
        return this_num, that_num

    def less_than(self, other: NumberParam | BigNumber) -> bool:
        """True if this value is strictly less than other.

        Raises:
            InvalidInputType, InvalidNumberFormat: If other cannot be parsed
        """
        this_num, that_num = self._aligned(other)
        return this_num < that_num

    def bigger_than(self, other: NumberParam | BigNumber) -> bool:
        """True if this value is strictly greater than other.

        Raises:
            InvalidInputType, InvalidNumberFormat: If other cannot be parsed
        """
        this_num, that_num = self._aligned(other)
        return this_num > that_num

    def is_equal(self, other: NumberParam | BigNumber) -> bool:
        """True if both values are numerically equal, whatever their scales.

        Raises:
            InvalidInputType, InvalidNumberFormat: If other cannot be parsed
        """
        this_num, that_num = self._aligned(other)
        return this_num == that_num

    def compare(self, other: NumberParam | BigNumber) -> int:
        """Return -1, 0 or 1 as this value is less than, equal to or greater than other."""
        this_num, that_num = self._aligned(other)
        return (this_num > that_num) - (this_num < that_num)

    # Equality only admits exact types so that equal values hash equally
    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigNumber) or (isinstance(other, int) and not isinstance(other, bool)):
            return self.is_equal(other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not _is_orderable(other):
            return NotImplemented
        sign = _non_finite_sign(other)
        if sign is not None:
            return sign > 0
        return self.less_than(other)  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if not _is_orderable(other):
            return NotImplemented
        sign = _non_finite_sign(other)
        if sign is not None:
            return sign > 0
        return not self.bigger_than(other)  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if not _is_orderable(other):
            return NotImplemented
        sign = _non_finite_sign(other)
        if sign is not None:
            return sign < 0
        return self.bigger_than(other)  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if not _is_orderable(other):
            return NotImplemented
        sign = _non_finite_sign(other)
        if sign is not None:
            return sign < 0
        return not self.less_than(other)  # type: ignore[arg-type]

    def __hash__(self) -> int:
        magnitude, scale = self._magnitude, self._scale
        while scale and magnitude % 10 == 0:
            magnitude //= 10
            scale -= 1
        if scale == 0:
            return hash(magnitude)
        return hash((magnitude, scale))
