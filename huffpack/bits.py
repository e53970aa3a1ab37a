"""
bits.py

Bit sequences and their packing into bytes.
"""


import numpy as np
from typing import Iterable, Iterator, List, Optional

from .validators import validate_bit


class BitVector:
    """
    An ordered, growable sequence of bits.
    """

    def __init__(self, bits: Optional[Iterable] = None) -> None:
        self._bits: List[bool] = []
        if bits is not None:
            self.extend(bits)

    def append(self, bit) -> None:
        """
        Append a single bit.

        Raises:
            ValueError: If the bit is not 0, 1, True or False.
        """
        self._bits.append(validate_bit(bit))

    def extend(self, bits: Iterable) -> None:
        self._bits.extend(validate_bit(bit) for bit in bits)

    @property
    def bit_length(self) -> int:
        return len(self._bits)

    def to_array(self) -> np.ndarray:
        return np.array(self._bits, dtype=bool)

    def pack(self) -> bytes:
        return pack_bits(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __getitem__(self, index):
        return self._bits[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BitVector):
            return self._bits == other._bits
        return False

    def __str__(self) -> str:
        return "".join("1" if bit else "0" for bit in self._bits)

    def __repr__(self) -> str:
        return f"BitVector('{self}')"


def pack_bits(bits: Iterable) -> bytes:
    """
    Pack bits into bytes, most significant bit first.

    A trailing group of fewer than 8 bits fills the high-order end of the last
    byte and the remaining low-order bits are zero. The bit count itself is not
    stored.

    Args:
        bits (Iterable): Bits as bools or the integers 0 and 1.

    Returns:
        bytes: ceil(len(bits) / 8) packed bytes.
    """
    if isinstance(bits, BitVector):
        array = bits.to_array()
    elif isinstance(bits, np.ndarray):
        if bits.dtype != np.bool_ and not (np.issubdtype(bits.dtype, np.integer) and np.isin(bits, (0, 1)).all()):
            raise ValueError("Bits must be 0, 1, True or False")
        array = bits.astype(bool).ravel()
    else:
        array = np.array([validate_bit(bit) for bit in bits], dtype=bool)
    if array.size == 0:
        return b""
    return np.packbits(array, bitorder="big").tobytes()
