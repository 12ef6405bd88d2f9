import dataclasses

from ledgerdecimal.exceptions.arithmetic import InvalidOperand


@dataclasses.dataclass(slots=True, frozen=True)
class RawInteger:
    """
    An integer that is already scaled to the target precision, e.g. a token balance or allowance
    returned by a contract call.

    Wrapping a value in `RawInteger` opts it into pass-through semantics: it is used as the scaled
    integer verbatim and never multiplied by 10**decimals. Plain Python integers are treated as
    whole-unit numbers instead.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidOperand(self.value, "raw integers must be of type int")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
