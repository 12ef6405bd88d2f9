from .config import settings
from .version import __version__

# isort: split

from .constants import MAX_UINT256
from .conversions import (
    DecimalConvertible,
    format_decimal,
    from_ray,
    from_wei,
    parse_decimal,
    to_eth,
    to_ray,
    to_wei,
)
from .exceptions import (
    DecimalError,
    DigitLimitExceeded,
    DivisionByZero,
    InvalidOperand,
    LedgerDecimalError,
    NegativeDecimals,
)
from .logging import logger
from .scaled_decimal import ScaledDecimal, decimal, one, to_scaled_integer
from .types import Numberish, RawInteger

__all__ = (
    "MAX_UINT256",
    "DecimalConvertible",
    "DecimalError",
    "DigitLimitExceeded",
    "DivisionByZero",
    "InvalidOperand",
    "LedgerDecimalError",
    "NegativeDecimals",
    "Numberish",
    "RawInteger",
    "ScaledDecimal",
    "__version__",
    "constants",
    "conversions",
    "decimal",
    "exceptions",
    "format_decimal",
    "from_ray",
    "from_wei",
    "logger",
    "one",
    "parse_decimal",
    "scaled_decimal",
    "settings",
    "to_eth",
    "to_ray",
    "to_scaled_integer",
    "to_wei",
    "types",
)
