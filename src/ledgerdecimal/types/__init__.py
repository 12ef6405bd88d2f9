from .aliases import Numberish
from .concrete import RawInteger

__all__ = (
    "Numberish",
    "RawInteger",
)
