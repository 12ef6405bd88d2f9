from ledgerdecimal.exceptions.arithmetic import (
    DecimalError,
    DigitLimitExceeded,
    DivisionByZero,
    InvalidOperand,
    NegativeDecimals,
)
from ledgerdecimal.exceptions.base import LedgerDecimalError
from ledgerdecimal.exceptions.config import ConfigFileExists

from . import arithmetic, config

__all__ = (
    "ConfigFileExists",
    "DecimalError",
    "DigitLimitExceeded",
    "DivisionByZero",
    "InvalidOperand",
    "LedgerDecimalError",
    "NegativeDecimals",
    "arithmetic",
    "config",
)
