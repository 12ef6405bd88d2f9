from typing import Any


class LedgerDecimalError(Exception):
    """
    Base exception used as the parent class for all exceptions raised by this package.

    Calling code should catch `LedgerDecimalError` and derived classes separately before general
    exceptions, e.g.:

    ```
    try:
        ledgerdecimal.some_function()
    except SpecificLedgerDecimalError:
        ... # handle a specific exception
    except LedgerDecimalError:
        ... # handle non-specific ledgerdecimal exception
    except Exception:
        ... # handle exceptions raised by 3rd party dependencies or Python built-ins
    ```

    An optional string-formatted message may be attached to the exception and retrieved by accessing
    the `.message` attribute.
    """

    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
            super().__init__(message)

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.message,)
