import functools
import math
import re
import sys
from decimal import Decimal
from fractions import Fraction
from typing import Any, NoReturn

from ledgerdecimal.constants import DEFAULT_DECIMAL_PRECISION
from ledgerdecimal.exceptions.arithmetic import (
    DigitLimitExceeded,
    DivisionByZero,
    InvalidOperand,
    NegativeDecimals,
)
from ledgerdecimal.logging import logger
from ledgerdecimal.types import Numberish, RawInteger

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


@functools.cache
def one(decimals: int) -> int:
    """
    1.0 expressed as a scaled integer at the given precision, e.g. one(6) == 1_000_000
    """

    return 10**decimals


def _div_toward_zero(numerator: int, denominator: int) -> int:
    # Python floor division rounds to negative infinity, fixed-point division truncates toward zero
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _validate_decimals(decimals: int) -> None:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidOperand(decimals, "decimals precision must be of type int")
    if decimals < 0:
        raise NegativeDecimals(decimals)


def _to_decimal_string(value: Any) -> str:
    """
    Render a native number or decimal literal as a plain positional decimal string.
    """

    match value:
        case bool():
            raise InvalidOperand(value, "booleans are not numbers")
        case int():
            return str(value)
        case float():
            if not math.isfinite(value):
                raise InvalidOperand(value, "non-finite floats cannot be represented")
            text = repr(value)
            if "e" in text:
                # repr uses scientific notation for very large or small magnitudes, e.g. 1e-07
                text = format(Decimal(text), "f")
            return text
        case Decimal():
            if not value.is_finite():
                raise InvalidOperand(value, "non-finite decimals cannot be represented")
            return format(value, "f")
        case str():
            text = value.strip()
            if _DECIMAL_LITERAL.fullmatch(text) is None:
                raise InvalidOperand(value, "not a decimal literal")
            return text
        case _:
            raise InvalidOperand(value, f"unsupported type {type(value).__name__}")


def to_scaled_integer(value: Numberish, decimals: int) -> int:
    """
    Convert a numeric value into the scaled integer representation at a fixed precision, e.g.
    to_scaled_integer(1.5, 6) == 1_500_000.

    Excess fractional digits are ALWAYS truncated, never rounded. Conversions:
        - `RawInteger` values pass through unchanged, they are assumed to be scaled already
        - `ScaledDecimal` values are upscaled exactly, or downscaled by truncating toward zero
        - native numbers and strings are parsed as decimal literals
    """

    _validate_decimals(decimals)

    match value:
        case RawInteger():
            return value.value
        case ScaledDecimal():
            if value.decimals == decimals:
                return value.scaled_value
            if value.decimals > decimals:
                return _div_toward_zero(value.scaled_value, one(value.decimals - decimals))
            return value.scaled_value * one(decimals - value.decimals)

    text = _to_decimal_string(value)
    whole, _, fraction = text.partition(".")
    negative = whole.startswith("-")
    whole = whole.lstrip("+-") or "0"

    if fraction[decimals:].strip("0"):
        logger.debug(f"Truncated {value!r} to {decimals} decimals")

    kept = fraction[:decimals]
    try:
        magnitude = int(whole) * one(decimals)
        if kept:
            magnitude += int(kept) * one(decimals - len(kept))
    except ValueError:
        raise DigitLimitExceeded(sys.get_int_max_str_digits()) from None
    return -magnitude if negative else magnitude


def _round_fraction(whole: str, fraction: str, max_decimals: int) -> tuple[str, str]:
    """
    Round the fraction digits half away from zero at the `max_decimals` boundary and trim trailing
    zeroes, carrying into the whole part if needed.

    e.g. ("0", "004555", 3) -> ("0", "005")
         ("0", "004000", 3) -> ("0", "004")
         ("0", "999600", 3) -> ("1", "")
    """

    if max_decimals >= len(fraction):
        return whole, fraction.rstrip("0")

    kept = fraction[:max_decimals]
    if fraction[max_decimals] >= "5":
        kept = str(int(kept) + 1).rjust(max_decimals, "0")
        if len(kept) > max_decimals:
            whole = str(int(whole) + 1)
            kept = kept[1:]
    return whole, kept.rstrip("0")


def _join(*, negative: bool, whole: str, fraction: str) -> str:
    text = f"{whole}.{fraction}" if fraction else whole
    if negative and (whole.strip("0") or fraction.strip("0")):
        return "-" + text
    return text


class ScaledDecimal:
    """
    An immutable fixed-point decimal with a strongly defined `decimals` precision, compatible with
    the ERC-20 `decimals()` concept. The value is held as an arbitrary-precision integer scaled by
    10**decimals, so 1.5 at 6 decimals is stored as 1_500_000.

    Any EXCESS fractional digits are ALWAYS truncated, never rounded. This applies to construction,
    downscaling to a lower precision, and the result of `mul` and `div`.

    Binary operations convert the right-hand operand to the precision of the left-hand operand, and
    return a result at that same precision.

    Operands may be:
        - `int`, `float`, `str` or `decimal.Decimal`, interpreted as a decimal number
        - `ScaledDecimal`, rescaled to the required precision
        - `RawInteger`, an already-scaled integer that is used as-is

    The Python operators accept the numeric types above but not strings. Use the named methods,
    e.g. `x.add("1.5")`, to operate on decimal literals. The comparison operators use the exact
    value of the operand, so decimal(1, 6) == 1.0000001 is False while decimal(1, 6).equals(1.0000001)
    is True.
    """

    __slots__ = ("decimals", "scaled_value")

    decimals: int
    scaled_value: int

    def __init__(self, value: Numberish, decimals: int) -> None:
        object.__setattr__(self, "scaled_value", to_scaled_integer(value, decimals))
        object.__setattr__(self, "decimals", decimals)

    @classmethod
    def from_scaled_integer(cls, value: int, decimals: int) -> "ScaledDecimal":
        return cls(RawInteger(value), decimals)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__.from_scaled_integer, (self.scaled_value, self.decimals)

    def _scale(self, x: Numberish) -> int:
        return to_scaled_integer(x, self.decimals)

    def _with_value(self, scaled_value: int) -> "ScaledDecimal":
        return self.from_scaled_integer(scaled_value, self.decimals)

    def to_integer(self) -> int:
        """
        The scaled integer held by this decimal, suitable for passing to a contract.
        """

        return self.scaled_value

    def to_decimal(self, x: Numberish) -> "ScaledDecimal":
        """
        Convert `x` to a decimal with the same precision as this one.
        """

        return self.__class__(x, self.decimals)

    def to_precision(self, decimals: int) -> "ScaledDecimal":
        """
        Convert this decimal to another precision. Reducing the precision truncates.
        """

        return self.__class__(self, decimals)

    def to_string(self) -> str:
        return self._render(self.decimals)

    def to_truncated(self, max_decimals: int = 0) -> str:
        """
        Render the decimal with the fraction truncated to at most `max_decimals` digits.
        """

        return self._render(max_decimals)

    def to_rounded(self, max_decimals: int) -> str:
        """
        Render the decimal with the fraction rounded half away from zero to at most `max_decimals`
        digits, dropping trailing zeroes. Pass -1 to keep the full precision.

        e.g. 0.004555 -> "0.005" at 3 decimals
             100.040000 -> "100.04" at -1 decimals
        """

        return self._render(max_decimals, rounded=True)

    def _render(self, max_decimals: int, *, rounded: bool = False) -> str:
        negative = self.scaled_value < 0
        try:
            digits = str(-self.scaled_value if negative else self.scaled_value)
        except ValueError:
            raise DigitLimitExceeded(sys.get_int_max_str_digits()) from None

        if self.decimals == 0:
            return _join(negative=negative, whole=digits, fraction="")

        if len(digits) > self.decimals:
            whole, fraction = digits[: -self.decimals], digits[-self.decimals :]
        else:
            whole, fraction = "0", digits.rjust(self.decimals, "0")

        if max_decimals == -1:
            max_decimals = self.decimals

        if max_decimals <= 0:
            fraction = ""
        elif rounded:
            whole, fraction = _round_fraction(whole, fraction, max_decimals)
        else:
            fraction = fraction[:max_decimals]

        return _join(negative=negative, whole=whole, fraction=fraction)

    def to_hex_string(self, pad_zeroes: int | None = None) -> str:
        """
        Render the scaled integer as a hex string, optionally left-padded with zeroes to a fixed
        count of hex digits. Negative values are prefixed with a minus sign, e.g. "-0xff".
        """

        hex_digits = format(abs(self.scaled_value), "x")
        if pad_zeroes:
            hex_digits = hex_digits.rjust(pad_zeroes, "0")
        return ("-0x" if self.scaled_value < 0 else "0x") + hex_digits

    def to_json(self) -> dict[str, str]:
        return {"kind": "Decimal", "value": self.to_string()}

    def to_number(self) -> float:
        """
        Convert to a float. Values with more than 17 significant digits lose precision.
        """

        return float(self.to_string())

    def equals(self, other: Numberish) -> bool:
        """
        Check equality with another value.

        Two `ScaledDecimal` values are equal only if both the precision and the scaled integer
        match, so decimal(1, 6) does not equal decimal(1, 18). Any other operand is first converted
        to this decimal's precision, so decimal(1, 6) equals 1.0.
        """

        if isinstance(other, ScaledDecimal):
            return self.decimals == other.decimals and self.scaled_value == other.scaled_value
        return self.scaled_value == self._scale(other)

    def eq(self, other: Numberish) -> bool:
        return self.equals(other)

    def add(self, x: Numberish) -> "ScaledDecimal":
        return self._with_value(self.scaled_value + self._scale(x))

    def sub(self, x: Numberish) -> "ScaledDecimal":
        return self._with_value(self.scaled_value - self._scale(x))

    def mul(self, x: Numberish) -> "ScaledDecimal":
        # (a * b) / ONE
        return self._with_value(
            _div_toward_zero(self.scaled_value * self._scale(x), one(self.decimals))
        )

    def div(self, x: Numberish) -> "ScaledDecimal":
        # (a * ONE) / b
        divisor = self._scale(x)
        if divisor == 0:
            raise DivisionByZero
        return self._with_value(_div_toward_zero(self.scaled_value * one(self.decimals), divisor))

    def abs(self) -> "ScaledDecimal":
        return self._with_value(-self.scaled_value if self.scaled_value < 0 else self.scaled_value)

    def gt(self, x: Numberish) -> bool:
        return self.scaled_value > self._scale(x)

    def lt(self, x: Numberish) -> bool:
        return self.scaled_value < self._scale(x)

    def gte(self, x: Numberish) -> bool:
        return self.scaled_value >= self._scale(x)

    def lte(self, x: Numberish) -> bool:
        return self.scaled_value <= self._scale(x)

    def is_zero(self) -> bool:
        return self.scaled_value == 0

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()!r}, decimals={self.decimals})"

    def __float__(self) -> float:
        return self.to_number()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def _as_fraction(self) -> Fraction:
        return Fraction(self.scaled_value, one(self.decimals))

    def _exact_operand(self, other: object) -> Fraction | int | float:
        """
        The exact value of a numeric operand for the comparison operators. Unlike the named
        methods, the operand is not truncated to this decimal's precision.
        """

        match other:
            case ScaledDecimal():
                return other._as_fraction()
            case RawInteger():
                return Fraction(other.value, one(self.decimals))
            case Decimal() if other.is_nan():
                return math.nan
            case Decimal() if other.is_infinite():
                return -math.inf if other.is_signed() else math.inf
            case Decimal():
                return Fraction(other)
            case _:
                # int and float compare exactly against a Fraction, including inf and nan
                return other  # type: ignore[return-value]

    def __hash__(self) -> int:
        # Matches the hash of an equal int, float or decimal.Decimal
        return hash(self._as_fraction())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ScaledDecimal):
            return self.equals(other)
        if isinstance(other, RawInteger) or not _is_numeric_operand(other):
            return NotImplemented
        return self._as_fraction() == self._exact_operand(other)

    def __lt__(self, other: object) -> bool:
        if not _is_numeric_operand(other):
            return NotImplemented
        return self._as_fraction() < self._exact_operand(other)

    def __le__(self, other: object) -> bool:
        if not _is_numeric_operand(other):
            return NotImplemented
        return self._as_fraction() <= self._exact_operand(other)

    def __gt__(self, other: object) -> bool:
        if not _is_numeric_operand(other):
            return NotImplemented
        return self._as_fraction() > self._exact_operand(other)

    def __ge__(self, other: object) -> bool:
        if not _is_numeric_operand(other):
            return NotImplemented
        return self._as_fraction() >= self._exact_operand(other)

    def __add__(self, other: object) -> "ScaledDecimal":
        if not _is_numeric_operand(other):
            return NotImplemented
        return self.add(other)  # type: ignore[arg-type]

    def __radd__(self, other: object) -> "ScaledDecimal":
        return self.__add__(other)

    def __sub__(self, other: object) -> "ScaledDecimal":
        if not _is_numeric_operand(other):
            return NotImplemented
        return self.sub(other)  # type: ignore[arg-type]

    def __rsub__(self, other: object) -> "ScaledDecimal":
        if not _is_numeric_operand(other):
            return NotImplemented
        return self.to_decimal(other).sub(self)  # type: ignore[arg-type]

    def __mul__(self, other: object) -> "ScaledDecimal":
        if not _is_numeric_operand(other):
            return NotImplemented
        return self.mul(other)  # type: ignore[arg-type]

    def __rmul__(self, other: object) -> "ScaledDecimal":
        return self.__mul__(other)

    def __truediv__(self, other: object) -> "ScaledDecimal":
        if not _is_numeric_operand(other):
            return NotImplemented
        return self.div(other)  # type: ignore[arg-type]

    def __rtruediv__(self, other: object) -> "ScaledDecimal":
        if not _is_numeric_operand(other):
            return NotImplemented
        return self.to_decimal(other).div(self)  # type: ignore[arg-type]

    def __neg__(self) -> "ScaledDecimal":
        return self._with_value(-self.scaled_value)

    def __abs__(self) -> "ScaledDecimal":
        return self.abs()


def _is_numeric_operand(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (ScaledDecimal, RawInteger, int, float, Decimal))


def decimal(value: Numberish, decimals: int = DEFAULT_DECIMAL_PRECISION) -> ScaledDecimal:
    """
    Create a new `ScaledDecimal`, with a default precision of 18 decimals.

    Any EXCESS digits are ALWAYS truncated, not rounded!
    """

    return ScaledDecimal(value, decimals)
