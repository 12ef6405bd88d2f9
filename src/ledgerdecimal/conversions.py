from pydantic import BaseModel, ConfigDict

from ledgerdecimal.config import settings
from ledgerdecimal.constants import MAX_UINT256, RAY_DECIMALS, WAD_DECIMALS
from ledgerdecimal.logging import logger
from ledgerdecimal.scaled_decimal import ScaledDecimal, to_scaled_integer
from ledgerdecimal.types import Numberish, RawInteger
from ledgerdecimal.validation.decimal_values import ValidatedDecimals


def parse_decimal(value: Numberish, decimal_base: int) -> int:
    """
    Convert a decimal number into a scaled integer, e.g. parse_decimal("0.000001", 18) == 10**12

    MAX_UINT256 is returned unchanged regardless of `decimal_base`. Contracts treat it as an
    "unlimited" sentinel, e.g. for ERC-20 allowances, so it must never be scaled.
    """

    if isinstance(value, RawInteger):
        sentinel = value.value == MAX_UINT256
    else:
        sentinel = type(value) is int and value == MAX_UINT256

    if sentinel:
        logger.debug("Passing MAX_UINT256 through without scaling")
        return MAX_UINT256

    return to_scaled_integer(value, decimal_base)


def format_decimal(
    scaled_integer: int,
    decimal_base: int,
    max_digits: int | None = None,
) -> int | float | str:
    """
    Convert a scaled integer into the simplest native representation that preserves its value.

    The value is rendered at full precision with trailing zeroes removed. If the result fits within
    `max_digits` characters (default from settings, 17), it is returned as an int or float, e.g.
    2.5 or 30. Longer values cannot be held by a float without losing digits, so they are returned
    as a string, e.g. "0.00000000000001".
    """

    if max_digits is None:
        max_digits = settings.max_number_digits

    text = ScaledDecimal.from_scaled_integer(scaled_integer, decimal_base).to_rounded(-1)
    if len(text) > max_digits:
        return text
    if "." in text:
        return float(text)
    return int(text)


def to_wei(eth: Numberish) -> int:
    return parse_decimal(eth, WAD_DECIMALS)


def from_wei(wei: int) -> int | float | str:
    return format_decimal(wei, WAD_DECIMALS)


def to_eth(wei: int) -> int | float | str:
    return format_decimal(wei, WAD_DECIMALS)


def to_ray(value: Numberish) -> int:
    return parse_decimal(value, RAY_DECIMALS)


def from_ray(ray: int) -> int | float | str:
    return format_decimal(ray, RAY_DECIMALS)


class DecimalConvertible(BaseModel):
    """
    A fixed precision which converts between native numbers and the scaled integers used by a
    contract, e.g. DecimalConvertible(decimals=6) for a USDC-like token.
    """

    model_config = ConfigDict(frozen=True)

    decimals: ValidatedDecimals

    def to_integer(self, amount: Numberish) -> int:
        return parse_decimal(amount, self.decimals)

    def from_integer(self, value: int) -> int | float | str:
        return format_decimal(value, self.decimals)

    def to_decimal(self, amount: Numberish) -> ScaledDecimal:
        return ScaledDecimal(amount, self.decimals)
