from typing import Any

from ledgerdecimal.exceptions.base import LedgerDecimalError


class DecimalError(LedgerDecimalError):
    """
    Exception raised inside the fixed-point decimal type and its conversion helpers.
    """


class InvalidOperand(DecimalError):
    """
    Raised when a value cannot be interpreted as a fixed-point decimal operand.
    """

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason
        message = f"Invalid decimal operand {value!r}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message=message)

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.value, self.reason)


class DivisionByZero(DecimalError):
    """
    Raised when dividing a decimal by a zero-valued operand.
    """

    def __init__(self) -> None:
        super().__init__(message="Division by zero")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, ()


class NegativeDecimals(DecimalError):
    """
    Raised when a decimal is constructed with a negative fractional digit count.
    """

    def __init__(self, decimals: int) -> None:
        self.decimals = decimals
        super().__init__(message=f"Decimals precision must be non-negative, got {decimals}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.decimals,)


class DigitLimitExceeded(DecimalError):
    """
    Raised when a decimal string conversion would exceed the interpreter's integer string
    conversion limit, see `sys.set_int_max_str_digits`.
    """

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(
            message=f"Integer string conversion exceeds the limit of {limit} digits"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.limit,)
