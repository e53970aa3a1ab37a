"""
tree.py

Prefix tree construction by greedy merging of the two lightest nodes.
"""


import abc
import heapq
import itertools
from typing import Iterator, List, Optional, Tuple

from .errors import EmptyInputError
from .logger import Logger, TreeBuildingProgressStep
from .models import Symbol, FrequencyTable
from .validators import validate_type


class HuffmanNode(abc.ABC):
    """
    Abstract base of the two node kinds, HuffmanLeaf and HuffmanInternal.
    """

    @property
    @abc.abstractmethod
    def weight(self) -> int:
        pass

    def leaves(self) -> Iterator["HuffmanLeaf"]:
        """Yield the leaves of the subtree from left to right."""
        stack: List[HuffmanNode] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, HuffmanLeaf):
                yield node
            elif isinstance(node, HuffmanInternal):
                stack.append(node.right)
                stack.append(node.left)
            else:
                raise TypeError(f"Unknown node type: {type(node).__name__}")


class HuffmanLeaf(HuffmanNode):
    def __init__(self, symbol: Symbol, weight: int) -> None:
        validate_type(symbol, "Symbol", Symbol)
        self.symbol: Symbol = symbol
        self._weight: int = weight

    @property
    def weight(self) -> int:
        return self._weight

    def __repr__(self) -> str:
        return f"HuffmanLeaf({self.symbol!r}, {self._weight})"


class HuffmanInternal(HuffmanNode):
    def __init__(self, left: HuffmanNode, right: HuffmanNode) -> None:
        validate_type(left, "Left child", HuffmanNode)
        validate_type(right, "Right child", HuffmanNode)
        self.left: HuffmanNode = left
        self.right: HuffmanNode = right
        self._weight: int = left.weight + right.weight

    @property
    def weight(self) -> int:
        return self._weight

    def __repr__(self) -> str:
        return f"HuffmanInternal({self.left!r}, {self.right!r})"


def build_tree(frequency_table: FrequencyTable, logger: Optional[Logger] = None) -> HuffmanNode:
    """
    Build a prefix tree from symbol frequencies.

    Leaves enter the queue in code point order. Queue entries are ordered by
    (weight, insertion sequence), so among equal weights the node inserted
    first is popped first. The first node popped becomes the left child.

    Args:
        frequency_table (FrequencyTable): Counts of every distinct symbol.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        HuffmanNode: The root. A single-symbol table yields a lone leaf.

    Raises:
        EmptyInputError: If the table has no entries.
    """
    validate_type(frequency_table, "Frequency table", FrequencyTable)
    if frequency_table.get_size() == 0:
        raise EmptyInputError("Cannot build a prefix tree from an empty frequency table")

    sequence = itertools.count()
    heap: List[Tuple[int, int, HuffmanNode]] = []
    for symbol in frequency_table.get_sorted_symbols():
        leaf = HuffmanLeaf(symbol, frequency_table.get_frequency(symbol))
        heap.append((leaf.weight, next(sequence), leaf))
    heapq.heapify(heap)

    merges = len(heap) - 1
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = HuffmanInternal(left, right)
        heapq.heappush(heap, (merged.weight, next(sequence), merged))
        if logger is not None:
            logger.log(TreeBuildingProgressStep("Merging nodes", merges))

    return heap[0][2]
