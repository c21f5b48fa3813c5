"""Serialization helpers for BigNumber.

BigNumber values always travel as decimal strings: never as floats and
never as the raw magnitude. This keeps the exact value and the apparent
scale ("1.50" stays "1.50") through any text round-trip.

Usage with pydantic:
    class Quote(BaseModel):
        price: BigNumberField

    Quote(price="001.50").model_dump_json()  # '{"price":"1.50"}'

Usage with json:
    json.dumps({"price": BigNumber("1.50")}, default=json_default)
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from bignumber.errors import BigNumberError
from bignumber.number import BigNumber

# JSON schema pattern for the accepted string grammar (leading zeros allowed)
DECIMAL_PATTERN = r"^-?[0-9]+(\.[0-9]+)?$"


def to_big_number(value: Any) -> BigNumber:
    """Coerce any accepted input into a BigNumber.

    Raises:
        ValueError: If value cannot be parsed (BigNumberError is a ValueError,
            so pydantic reports it as a validation error)
    """
    if isinstance(value, BigNumber):
        return value
    return BigNumber(value)


def validate_decimal_string(value: Any) -> str:
    """Validate a decimal literal and return its canonical string form.

    Args:
        value: Anything BigNumber accepts (str, int, float, Decimal)

    Returns:
        Canonical decimal string, e.g. "007.50" -> "7.50"

    Raises:
        ValueError: If value is not a valid decimal number
    """
    try:
        return str(to_big_number(value))
    except BigNumberError as err:
        raise ValueError(str(err)) from err


def json_default(value: Any) -> str:
    """`default=` hook for json.dumps that renders BigNumber as its decimal string.

    Raises:
        TypeError: For any other non-serializable object, as json expects
    """
    if isinstance(value, BigNumber):
        return value.to_json()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class _BigNumberPydanticAnnotation:
    """Teaches pydantic to validate into BigNumber and serialize to a decimal string."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,
        _handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            to_big_number,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: core_schema.CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "pattern": DECIMAL_PATTERN,
            "description": "Arbitrary-precision decimal number as string",
        }


# BigNumber model field: accepts str/int/float/Decimal/BigNumber, dumps as string
BigNumberField = Annotated[BigNumber, _BigNumberPydanticAnnotation]

# Decimal number kept as a canonical string (validated)
DecimalString = Annotated[
    str,
    BeforeValidator(validate_decimal_string),
    Field(description="Arbitrary-precision decimal number as string"),
]
