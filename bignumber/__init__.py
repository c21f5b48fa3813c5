"""Arbitrary-precision decimal numbers with exact comparison and formatting."""

from bignumber.config import DEFAULT_FORMAT_CONFIG, FormatConfig, RoundingMode
from bignumber.errors import (
    BigNumberError,
    InvalidInputType,
    InvalidNumberFormat,
    InvalidPrecision,
    InvalidRoundingMode,
)
from bignumber.number import BigNumber, NumberParam

__version__ = "0.1.0"
__all__ = [
    # Value type
    "BigNumber",
    "NumberParam",
    # Config
    "FormatConfig",
    "RoundingMode",
    "DEFAULT_FORMAT_CONFIG",
    # Errors
    "BigNumberError",
    "InvalidInputType",
    "InvalidNumberFormat",
    "InvalidPrecision",
    "InvalidRoundingMode",
    "__version__",
]
