"""
models.py

The shared objects used in huffpack.

"""


from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import MissingCodeError

Code = Tuple[bool, ...]


class Symbol:
    """
    Represents a single character of the input text.
    """
    def __init__(self, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("Symbol must be a single character string")
        self.char: str = char

    @property
    def value(self) -> int:
        """The Unicode code point of the symbol."""
        return ord(self.char)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Symbol):
            return self.char == other.char
        return False

    def __lt__(self, other: "Symbol") -> bool:
        return self.value < other.value

    def __str__(self) -> str:
        return repr(self.char)

    def __repr__(self) -> str:
        return f"Symbol({self.char!r})"

    def __hash__(self) -> int:
        return hash(self.char)


class SymbolFrequency:
    """
    Represents a symbol together with its frequency.
    """
    def __init__(self, symbol: Symbol, frequency: int) -> None:
        self.symbol: Symbol = symbol
        self.frequency: int = frequency

    def __str__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"


class FrequencyTable:
    """
    Read-only mapping of symbols to their occurrence counts.
    """
    def __init__(self, frequencies: Mapping[Symbol, int]) -> None:
        counts: Dict[Symbol, int] = {}
        for symbol, frequency in frequencies.items():
            if not isinstance(symbol, Symbol):
                raise ValueError("Frequency table keys must be of type Symbol")
            if isinstance(frequency, bool) or not isinstance(frequency, int) or frequency < 1:
                raise ValueError("Frequencies must be positive integers")
            counts[symbol] = frequency
        self._frequencies: Mapping[Symbol, int] = MappingProxyType(counts)
        self._sorted_symbols: Optional[List[Symbol]] = None

    def get_frequency(self, symbol: Symbol) -> int:
        """
        Get the number of occurrences of a symbol.

        Args:
            symbol (Symbol): The symbol to look up.

        Returns:
            int: The count, 0 if the symbol never occurred.
        """
        return self._frequencies.get(symbol, 0)

    def get_size(self) -> int:
        """Number of distinct symbols."""
        return len(self._frequencies)

    def get_total(self) -> int:
        """Total number of symbols counted."""
        return sum(self._frequencies.values())

    def contains(self, symbol: Symbol) -> bool:
        return symbol in self._frequencies

    def get_sorted_symbols(self) -> List[Symbol]:
        """
        Get the distinct symbols ordered by code point.

        Returns:
            List[Symbol]: The sorted symbols.
        """
        if self._sorted_symbols is None:
            self._sorted_symbols = sorted(self._frequencies, key=lambda s: s.value)
        return list(self._sorted_symbols)

    def get_symbol_frequencies(self) -> List[SymbolFrequency]:
        return [SymbolFrequency(s, self._frequencies[s]) for s in self.get_sorted_symbols()]

    def items(self):
        return self._frequencies.items()

    def __len__(self) -> int:
        return len(self._frequencies)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._frequencies)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return False
        return dict(self._frequencies) == dict(other._frequencies)

    def __repr__(self) -> str:
        return f"FrequencyTable({self.get_symbol_frequencies()})"


class CodeTable:
    """
    Mapping of symbols to their prefix codes.

    A code is a tuple of bools, True standing for bit 1.
    """
    def __init__(self, codes: Optional[Mapping[Symbol, Code]] = None) -> None:
        self._codes: Dict[Symbol, Code] = {}
        if codes is not None:
            for symbol, code in codes.items():
                self.add(symbol, code)

    def add(self, symbol: Symbol, code: Code) -> None:
        """
        Assign a code to a symbol.

        Args:
            symbol (Symbol): The symbol.
            code (Code): Sequence of bits for the symbol.
        """
        if not isinstance(symbol, Symbol):
            raise ValueError("Symbol must be of type Symbol")
        if symbol in self._codes:
            raise ValueError(f"Symbol {symbol} already has a code")
        self._codes[symbol] = tuple(bool(bit) for bit in code)

    def get_code(self, symbol: Symbol) -> Code:
        """
        Get the code of a symbol.

        Raises:
            MissingCodeError: If the symbol has no code.
        """
        try:
            return self._codes[symbol]
        except KeyError:
            raise MissingCodeError(symbol) from None

    def code_length(self, symbol: Symbol) -> int:
        return len(self.get_code(symbol))

    def contains(self, symbol: Symbol) -> bool:
        return symbol in self._codes

    def get_size(self) -> int:
        return len(self._codes)

    def get_sorted_items(self) -> List[Tuple[Symbol, Code]]:
        """Symbol and code pairs ordered by code point."""
        return sorted(self._codes.items(), key=lambda item: item[0].value)

    def items(self):
        return self._codes.items()

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._codes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeTable):
            return False
        return self._codes == other._codes

    def __str__(self) -> str:
        entries = ", ".join(
            f"{symbol}: {''.join('1' if bit else '0' for bit in code)}"
            for symbol, code in self.get_sorted_items()
        )
        return f"{{{entries}}}"
