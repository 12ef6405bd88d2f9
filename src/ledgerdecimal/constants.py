__all__ = (
    "DEFAULT_DECIMAL_PRECISION",
    "MAX_NUMBER_DIGITS",
    "MAX_UINT256",
    "RAY_DECIMALS",
    "WAD_DECIMALS",
)

import typing


def _max_uint(bits: int) -> int:
    return typing.cast("int", 2**bits - 1)


MAX_UINT256 = _max_uint(256)

# Matches the most common ERC-20 precision, e.g. WETH
DEFAULT_DECIMAL_PRECISION = 18

# Wad: decimal numbers with 18 digits of precision
WAD_DECIMALS = 18

# Ray: decimal numbers with 27 digits of precision
RAY_DECIMALS = 27

# A float carries at most 17 significant digits, so formatted decimals longer than this are
# returned as strings, e.g. 50.09823182711198 -> 50.09823182711198 but
# 50.09823182711198117 -> '50.09823182711198117'
MAX_NUMBER_DIGITS = 17
