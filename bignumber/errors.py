"""BigNumber error classes.

All errors derive from BigNumberError, which is a ValueError so that
validation layers (pydantic, argparse handlers) treat them as bad input.
"""


class BigNumberError(ValueError):
    """Base error for BigNumber operations."""

    pass


class InvalidInputType(BigNumberError, TypeError):
    """Construction received a value of an unsupported type."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(
            f"BigNumber received an invalid type: {type_name}. "
            "Only int, float, Decimal and str are permitted."
        )


class InvalidNumberFormat(BigNumberError):
    """A string matched neither the integer nor the float grammar."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"BigNumber received an invalid number format: {value!r}")


class InvalidPrecision(BigNumberError):
    """Precision or scale must be a non-negative integer."""

    pass


class InvalidRoundingMode(BigNumberError):
    """Unknown rounding mode name."""

    pass
