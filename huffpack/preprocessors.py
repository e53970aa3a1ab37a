import abc
from typing import Any, List, Optional

from .models import Symbol
from .logger import Logger
from .settings import DEFAULT_TEXT_ENCODING
from .validators import validate_type


class BasePreprocessor(abc.ABC):
    @property
    @abc.abstractmethod
    def code(self) -> int:
        """Return the unique identification code for the preprocessor."""
        pass

    @abc.abstractmethod
    def convert_to_symbols(self, data: Any) -> List[Symbol]:
        """
        Convert raw input to the list of symbols to be encoded.

        Args:
            data: The input data.

        Returns:
            List[Symbol]: One symbol per character, in input order.
        """
        pass


class TextPreprocessor(BasePreprocessor):
    """
    Text Preprocessor: Each character of a string is assigned to a symbol.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    def code(self) -> int:
        return 1

    def convert_to_symbols(self, data: str) -> List[Symbol]:
        validate_type(data, "Text", str)

        cache = {}
        symbols: List[Symbol] = []
        for char in data:
            symbol = cache.get(char)
            if symbol is None:
                symbol = Symbol(char)
                cache[char] = symbol
            symbols.append(symbol)
        return symbols


class EncodedTextPreprocessor(TextPreprocessor):
    """
    Encoded Text Preprocessor: bytes are decoded to text, then each character
    is assigned to a symbol.
    """
    def __init__(self, encoding: str = DEFAULT_TEXT_ENCODING, logger: Optional[Logger] = None) -> None:
        super().__init__(logger)
        validate_type(encoding, "Encoding", str)
        self.encoding: str = encoding

    @property
    def code(self) -> int:
        return 2

    def decode(self, data: bytes) -> str:
        validate_type(data, "Data", bytes)
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError:
            raise ValueError(f"Data is not valid {self.encoding} text")
        except LookupError:
            raise ValueError(f"Unknown text encoding: {self.encoding}")

    def convert_to_symbols(self, data: bytes) -> List[Symbol]:
        return super().convert_to_symbols(self.decode(data))


def get_preprocessor(code: int, logger: Optional[Logger] = None) -> BasePreprocessor:
    """
    Retrieve a preprocessor instance based on the given code.

    Args:
        code (int): The preprocessor code.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        BasePreprocessor: An instance of a preprocessor.

    Raises:
        ValueError: If the preprocessor code is not supported.
    """
    if code == 1:
        return TextPreprocessor(logger)
    elif code == 2:
        return EncodedTextPreprocessor(logger=logger)
    else:
        raise ValueError("Preprocessor code not supported")
