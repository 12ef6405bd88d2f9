from typing import Annotated

from pydantic import Field

from ledgerdecimal.constants import MAX_NUMBER_DIGITS

# Count of fractional decimal digits carried by a fixed-point value, e.g. 6 for USDC or 18 for WETH
type ValidatedDecimals = Annotated[int, Field(strict=True, ge=0)]

# Settings values may arrive as strings from the environment, so these are not strict
type DecimalsSetting = Annotated[int, Field(ge=0)]

# Rendered decimal strings longer than this cannot round-trip through a float
type DigitBudgetSetting = Annotated[int, Field(ge=1, le=MAX_NUMBER_DIGITS)]
