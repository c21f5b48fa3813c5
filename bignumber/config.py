"""Formatting configuration for BigNumber."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)
from enum import Enum

import structlog

from bignumber.errors import InvalidRoundingMode

logger = structlog.get_logger()

# Environment variable selecting the default rounding mode
ROUNDING_ENV_VAR = "BIGNUMBER_ROUNDING"


class RoundingMode(Enum):
    """Rounding rules available to to_fixed()."""

    HALF_UP = "half_up"
    HALF_EVEN = "half_even"
    HALF_DOWN = "half_down"
    DOWN = "down"
    UP = "up"
    CEILING = "ceiling"
    FLOOR = "floor"

    @property
    def decimal_rounding(self) -> str:
        """The matching rounding constant from the decimal module."""
        return _DECIMAL_ROUNDING[self]

    @classmethod
    def parse(cls, name: str | RoundingMode) -> RoundingMode:
        """Resolve a mode from its value or member name (case-insensitive).

        Raises:
            InvalidRoundingMode: If the name matches no mode
        """
        if isinstance(name, RoundingMode):
            return name
        key = name.strip().lower()
        for mode in cls:
            if key in (mode.value, mode.name.lower()):
                return mode
        choices = ", ".join(mode.value for mode in cls)
        raise InvalidRoundingMode(f"Unknown rounding mode {name!r} (expected one of: {choices})")


_DECIMAL_ROUNDING = {
    RoundingMode.HALF_UP: ROUND_HALF_UP,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
    RoundingMode.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingMode.DOWN: ROUND_DOWN,
    RoundingMode.UP: ROUND_UP,
    RoundingMode.CEILING: ROUND_CEILING,
    RoundingMode.FLOOR: ROUND_FLOOR,
}


@dataclass(frozen=True)
class FormatConfig:
    """Centralized configuration for BigNumber formatting.

    Attributes:
        rounding: Rounding rule used by to_fixed() when rounding is requested
            and no explicit mode is passed (default: HALF_UP, ties away from zero)
    """

    rounding: RoundingMode = RoundingMode.HALF_UP

    @classmethod
    def from_env(cls) -> FormatConfig:
        """Build a config from BIGNUMBER_ROUNDING, falling back to defaults when unset."""
        raw = os.environ.get(ROUNDING_ENV_VAR)
        if raw is None or not raw.strip():
            return cls()
        return cls(rounding=RoundingMode.parse(raw))


# Default configuration instance (environment not applied)
DEFAULT_FORMAT_CONFIG = FormatConfig()


def get_format_config() -> FormatConfig:
    """Resolve the active config from the environment at call time.

    An unknown BIGNUMBER_ROUNDING is logged and the defaults are used, so a bad
    variable never breaks import or callers that do not round.
    """
    try:
        return FormatConfig.from_env()
    except InvalidRoundingMode as err:
        logger.warning(
            "bignumber_invalid_rounding_env",
            env_var=ROUNDING_ENV_VAR,
            value=os.environ.get(ROUNDING_ENV_VAR),
            error=str(err),
        )
        return DEFAULT_FORMAT_CONFIG
