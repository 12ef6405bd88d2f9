from decimal import Decimal
from typing import TYPE_CHECKING

from ledgerdecimal.types.concrete import RawInteger

if TYPE_CHECKING:
    from ledgerdecimal.scaled_decimal import ScaledDecimal

type Numberish = int | float | str | Decimal | RawInteger | ScaledDecimal
