import pathlib
from typing import Any

from ledgerdecimal.exceptions.base import LedgerDecimalError


class ConfigFileExists(LedgerDecimalError):
    """
    Raised by `ledgerdecimal config init` if a file exists at the target path.
    """

    def __init__(self, path: pathlib.Path) -> None:
        self.path = path
        super().__init__(message=f"A configuration file at {path} already exists.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.path,)
