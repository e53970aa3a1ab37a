"""
frequency.py

Symbol occurrence counting.
"""


from collections import defaultdict
from typing import List, Optional, Sequence, Union

from .logger import Logger, CountingProgressStep, SymbolFrequencyLog
from .models import Symbol, FrequencyTable
from .preprocessors import TextPreprocessor


class FrequencyCounter:
    """
    Tabulates how often each symbol occurs in the input.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def count(self, data: Union[str, Sequence[Symbol]]) -> FrequencyTable:
        """
        Count symbol occurrences in a single pass.

        Args:
            data (Union[str, Sequence[Symbol]]): Text, or symbols already produced by a preprocessor.

        Returns:
            FrequencyTable: The counts for every distinct symbol.
        """
        if isinstance(data, str):
            symbols: Sequence[Symbol] = TextPreprocessor(self.logger).convert_to_symbols(data)
        elif isinstance(data, (list, tuple)):
            symbols = data
        else:
            raise ValueError("Data must be a string or a sequence of symbols")

        interval = self.logger.get_step_interval(CountingProgressStep) if self.logger is not None else 0
        counts = defaultdict(int)
        for index, symbol in enumerate(symbols, 1):
            if not isinstance(symbol, Symbol):
                raise ValueError("Symbols must be of type Symbol")
            counts[symbol] += 1
            # one progress step per interval of symbols, plus the remainder at the end
            if interval and (index % interval == 0 or index == len(symbols)):
                steps = index % interval or interval
                self.logger.log(CountingProgressStep("Counting symbols", len(symbols), steps))

        table = FrequencyTable(counts)
        if self.logger is not None:
            for symbol_frequency in table.get_symbol_frequencies():
                self.logger.log(SymbolFrequencyLog(symbol_frequency.symbol, symbol_frequency.frequency))
        return table


def count_frequencies(data: Union[str, List[Symbol]], logger: Optional[Logger] = None) -> FrequencyTable:
    return FrequencyCounter(logger).count(data)
