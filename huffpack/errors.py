"""
errors.py

Exceptions raised by huffpack.
"""


class EmptyInputError(ValueError):
    """Raised when there is nothing to build a prefix tree from."""

    def __init__(self, message: str = "Input must contain at least one symbol") -> None:
        super().__init__(message)


class MissingCodeError(KeyError):
    """Raised when a symbol has no entry in the code table."""

    def __init__(self, symbol: object) -> None:
        self.symbol = symbol
        super().__init__(f"No code assigned to symbol {symbol!r}")


class SymbolRangeError(ValueError):
    """Raised when a value does not fit the one-byte container fields."""
    pass
