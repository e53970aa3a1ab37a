#settings.py

DEFAULT_TEXT_ENCODING = "utf-8"

# container records store the symbol and the code length in one byte each
MAX_SYMBOL_VALUE = 255
MAX_CODE_LENGTH = 255

COMPRESSED_FILE_EXTENSION = ".huff"


class HuffmanCoderSettings:
    """
    Settings for the Huffman coder.

    single_symbol_code_length controls the code given to the only symbol of a
    single-symbol input: 0 keeps the empty code, 1 assigns the code "0".
    """

    def __init__(self, single_symbol_code_length: int = 0) -> None:
        if isinstance(single_symbol_code_length, bool) or single_symbol_code_length not in (0, 1):
            raise ValueError("Single symbol code length must be 0 or 1")
        self.single_symbol_code_length: int = single_symbol_code_length

    def __repr__(self) -> str:
        return f"HuffmanCoderSettings(single_symbol_code_length={self.single_symbol_code_length})"
