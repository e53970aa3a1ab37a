"""
coders.py



"""


import abc
from typing import Optional, Sequence, Tuple

from .bits import BitVector
from .errors import MissingCodeError
from .logger import Logger, Log, LogLevel, CodeAssignmentLog, CodingLog, CodingProgressStep
from .models import Code, CodeTable, FrequencyTable, Symbol
from .settings import HuffmanCoderSettings
from .tree import HuffmanNode, HuffmanLeaf, HuffmanInternal, build_tree
from .validators import validate_type


def generate_codes(root: HuffmanNode, settings: Optional[HuffmanCoderSettings] = None) -> CodeTable:
    """
    Assign a code to every leaf by walking the tree depth first.

    Going left appends bit 0 and going right appends bit 1. A tree that is a
    single leaf gets the empty code, or the code "0" when
    settings.single_symbol_code_length is 1.

    Args:
        root (HuffmanNode): Root of the prefix tree.
        settings (Optional[HuffmanCoderSettings]): Coder settings.

    Returns:
        CodeTable: The code of every symbol in the tree.
    """
    validate_type(root, "Root", HuffmanNode)
    if settings is None:
        settings = HuffmanCoderSettings()

    table = CodeTable()

    def assign(node: HuffmanNode, prefix: Code) -> None:
        if isinstance(node, HuffmanLeaf):
            table.add(node.symbol, prefix)
        elif isinstance(node, HuffmanInternal):
            assign(node.left, prefix + (False,))
            assign(node.right, prefix + (True,))
        else:
            raise TypeError(f"Unknown node type: {type(node).__name__}")

    if isinstance(root, HuffmanLeaf) and settings.single_symbol_code_length == 1:
        assign(root, (False,))
    else:
        assign(root, ())
    return table


class CoderBase(abc.ABC):
    """
    Abstract base class for coders.
    """

    @property
    @abc.abstractmethod
    def coder_code(self) -> int:
        """
        Get the code for the coder.

        Returns:
            int: The coder code.
        """
        pass

    @abc.abstractmethod
    def build_code_table(self, frequency_table: FrequencyTable) -> Tuple[HuffmanNode, CodeTable]:
        """
        Derive the code table for a set of symbol frequencies.

        Args:
            frequency_table (FrequencyTable): Counts of every distinct symbol.

        Returns:
            Tuple[HuffmanNode, CodeTable]: The tree and the code table derived from it.
        """
        pass

    @abc.abstractmethod
    def encode(self, symbols: Sequence[Symbol], code_table: CodeTable) -> BitVector:
        """
        Encode a sequence of symbols into a bit sequence.

        Args:
            symbols (Sequence[Symbol]): The symbols to be encoded.
            code_table (CodeTable): The code of every symbol.

        Returns:
            BitVector: The concatenated codes.
        """
        pass


class HuffmanCoder(CoderBase):
    def __init__(self, settings: Optional[HuffmanCoderSettings] = None, logger: Optional[Logger] = None) -> None:
        if settings is None:
            settings = HuffmanCoderSettings()
        validate_type(settings, "Settings", HuffmanCoderSettings)
        self.settings: HuffmanCoderSettings = settings
        self.logger: Optional[Logger] = logger

    @property
    def coder_code(self) -> int:
        return 1

    def build_code_table(self, frequency_table: FrequencyTable) -> Tuple[HuffmanNode, CodeTable]:
        root = build_tree(frequency_table, self.logger)
        code_table = generate_codes(root, self.settings)
        if self.logger is not None:
            for symbol, code in code_table.get_sorted_items():
                self.logger.log(CodeAssignmentLog(symbol, len(code)))
        return root, code_table

    def encode(self, symbols: Sequence[Symbol], code_table: CodeTable) -> BitVector:
        validate_type(code_table, "Code table", CodeTable)

        interval = self.logger.get_step_interval(CodingProgressStep) if self.logger is not None else 0
        bits = BitVector()
        for index, symbol in enumerate(symbols, 1):
            try:
                code = code_table.get_code(symbol)
            except MissingCodeError as error:
                if self.logger is not None:
                    self.logger.log(Log("Coding_error", LogLevel.ERROR, f"Encoding failed: {error}"))
                raise
            bits.extend(code)
            if interval and (index % interval == 0 or index == len(symbols)):
                steps = index % interval or interval
                self.logger.log(CodingProgressStep("Encoding symbols", len(symbols), steps))

        if self.logger is not None:
            self.logger.log(CodingLog(len(symbols), bits.bit_length))
        return bits


def get_coder(code: int, settings: Optional[HuffmanCoderSettings] = None, logger: Optional[Logger] = None) -> CoderBase:
    """
    Retrieve a coder instance based on the given code.

    Raises:
        ValueError: If the coder code is not supported.
    """
    if code == 1:
        return HuffmanCoder(settings, logger)
    raise ValueError("Coder code not supported")
