import pydantic
import pytest

from ledgerdecimal import (
    MAX_UINT256,
    DecimalConvertible,
    InvalidOperand,
    RawInteger,
    ScaledDecimal,
    format_decimal,
    from_ray,
    from_wei,
    parse_decimal,
    settings,
    to_eth,
    to_ray,
    to_wei,
)


def bn18(x: str) -> int:
    """
    Independent conversion of a decimal literal into an 18 decimal scaled integer.
    """

    whole, _, fraction = x.partition(".")
    sign = -1 if whole.startswith("-") else 1
    return sign * (abs(int(whole)) * 10**18 + int(fraction.ljust(18, "0")))


def test_parse_decimal():
    assert parse_decimal("0.000000000000000000", 18) == bn18("0")
    assert parse_decimal("0.040000000000000000", 18) == bn18("0.04")
    assert parse_decimal("1.000000000000000000", 18) == bn18("1.0")
    assert parse_decimal("30.000000000000000000", 18) == bn18("30.0")
    assert parse_decimal("-2.5", 18) == bn18("-2.5")
    assert parse_decimal(0.000001, 18) == 10**12
    assert parse_decimal(ScaledDecimal("1.5", 6), 18) == bn18("1.5")
    assert parse_decimal(RawInteger(123), 18) == 123


def test_parse_decimal_truncates():
    assert parse_decimal("1.1234567", 6) == 1_123_456
    assert parse_decimal("-1.1234567", 6) == -1_123_456


def test_parse_decimal_invalid():
    with pytest.raises(InvalidOperand):
        parse_decimal("1e18", 18)


@pytest.mark.parametrize("decimal_base", [0, 6, 18, 27])
def test_parse_decimal_max_uint256_sentinel(decimal_base: int):
    assert parse_decimal(MAX_UINT256, decimal_base) == MAX_UINT256
    assert parse_decimal(RawInteger(MAX_UINT256), decimal_base) == MAX_UINT256


def test_parse_decimal_near_sentinel_is_scaled():
    assert parse_decimal(MAX_UINT256 - 1, 18) == (MAX_UINT256 - 1) * 10**18
    assert parse_decimal(str(MAX_UINT256), 18) == MAX_UINT256 * 10**18


def test_format_decimal():
    assert format_decimal(bn18("0.000000000000000000"), 18) == 0
    assert format_decimal(bn18("0.040000000000000000"), 18) == 0.04
    assert format_decimal(bn18("1.000000000000000000"), 18) == 1
    assert format_decimal(bn18("30.000000000000000000"), 18) == 30
    assert format_decimal(bn18("-2.5"), 18) == -2.5


def test_format_decimal_return_types():
    assert isinstance(format_decimal(bn18("30"), 18), int)
    assert isinstance(format_decimal(bn18("0.04"), 18), float)
    assert isinstance(format_decimal(1, 18), str)


def test_format_decimal_safe_digit_boundary():
    assert format_decimal(bn18("50.09823182711198"), 18) == 50.09823182711198
    assert format_decimal(bn18("50.09823182711198117"), 18) == "50.09823182711198117"
    assert format_decimal(1, 18) == "0.000000000000000001"

    # 17 characters is returned as a float, 18 characters as a string
    assert format_decimal(1234567890123455, 1) == 123456789012345.5
    assert format_decimal(12345678901234565, 1) == "1234567890123456.5"
    assert format_decimal(12345678901234567, 0) == 12345678901234567
    assert format_decimal(123456789012345678, 0) == "123456789012345678"


def test_format_decimal_rounds_nothing_at_full_precision():
    assert format_decimal(bn18("0.999999999999999999"), 18) == "0.999999999999999999"


def test_format_decimal_max_digits():
    assert format_decimal(bn18("1.5"), 18, max_digits=2) == "1.5"
    assert format_decimal(bn18("1.5"), 18, max_digits=3) == 1.5


def test_format_decimal_uses_configured_budget(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "max_number_digits", 4)
    assert format_decimal(bn18("1.25"), 18) == 1.25
    assert format_decimal(bn18("1.125"), 18) == "1.125"


def test_format_decimal_invalid():
    with pytest.raises(InvalidOperand):
        format_decimal("1000", 18)  # type: ignore[arg-type]


def test_wei_helpers():
    assert to_wei("1.5") == 1_500_000_000_000_000_000
    assert to_wei(2) == 2 * 10**18
    assert to_wei(MAX_UINT256) == MAX_UINT256
    assert from_wei(1_500_000_000_000_000_000) == 1.5
    assert to_eth(10**18) == 1


def test_ray_helpers():
    assert to_ray(1) == 10**27
    assert to_ray("0.5") == 5 * 10**26
    assert to_ray(MAX_UINT256) == MAX_UINT256
    assert from_ray(10**27) == 1
    assert from_ray(10**27 + 1) == "1.000000000000000000000000001"


def test_decimal_convertible():
    usdc = DecimalConvertible(decimals=6)
    assert usdc.to_integer("1.5") == 1_500_000
    assert usdc.to_integer("1.1234567") == 1_123_456
    assert usdc.to_integer(MAX_UINT256) == MAX_UINT256
    assert usdc.from_integer(1_500_000) == 1.5
    assert usdc.to_decimal(1).equals(ScaledDecimal(1, 6))


def test_decimal_convertible_validation():
    with pytest.raises(pydantic.ValidationError):
        DecimalConvertible(decimals=-1)
    with pytest.raises(pydantic.ValidationError):
        DecimalConvertible(decimals=True)
    with pytest.raises(pydantic.ValidationError):
        DecimalConvertible(decimals="6")

    usdc = DecimalConvertible(decimals=6)
    with pytest.raises(pydantic.ValidationError):
        usdc.decimals = 18
