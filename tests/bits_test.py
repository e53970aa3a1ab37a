import unittest
import numpy as np
from huffpack.bits import BitVector, pack_bits

class TestPackBits(unittest.TestCase):
    def test_full_byte(self):
        self.assertEqual(pack_bits([1, 0, 1, 0, 1, 0, 1, 0]), bytes([0b10101010]))

    def test_padding(self):
        self.assertEqual(pack_bits([1, 0, 1]), bytes([0b10100000]))

    def test_multiple_bytes_with_partial_tail(self):
        bits = [1] * 8 + [0, 1]
        self.assertEqual(pack_bits(bits), bytes([0xFF, 0b01000000]))

    def test_empty(self):
        self.assertEqual(pack_bits([]), b"")

    def test_bools(self):
        self.assertEqual(pack_bits((True, True, False)), bytes([0b11000000]))

    def test_length(self):
        for n in range(0, 33):
            self.assertEqual(len(pack_bits([1] * n)), (n + 7) // 8)

    def test_numpy_arrays(self):
        self.assertEqual(pack_bits(BitVector([1, 0, 1]).to_array()), b"\xa0")
        self.assertEqual(pack_bits(np.array([1, 0, 1], dtype=np.uint8)), b"\xa0")
        self.assertEqual(pack_bits(np.array([], dtype=bool)), b"")

    def test_numpy_scalars(self):
        self.assertEqual(pack_bits([np.True_, np.uint8(0), np.int64(1)]), b"\xa0")

    def test_invalid_numpy_array(self):
        with self.assertRaises(ValueError):
            pack_bits(np.array([1, 2, 0], dtype=np.uint8))
        with self.assertRaises(ValueError):
            pack_bits(np.array([1.0, 0.0]))

    def test_invalid_bit(self):
        with self.assertRaises(ValueError):
            pack_bits([0, 2])
        with self.assertRaises(ValueError):
            pack_bits(["1"])

class TestBitVector(unittest.TestCase):
    def test_append_and_extend(self):
        bits = BitVector()
        bits.append(1)
        bits.extend((False, True))
        self.assertEqual(len(bits), 3)
        self.assertEqual(bits.bit_length, 3)
        self.assertEqual(str(bits), "101")
        self.assertEqual(list(bits), [True, False, True])
        self.assertTrue(bits[2])

    def test_invalid_bit(self):
        with self.assertRaises(ValueError):
            BitVector([1, 3])

    def test_pack(self):
        bits = BitVector([0, 1, 1, 0, 1, 1, 1, 0, 1])
        self.assertEqual(bits.pack(), bytes([0b01101110, 0b10000000]))
        self.assertEqual(pack_bits(bits), bits.pack())

    def test_to_array(self):
        array = BitVector([1, 0]).to_array()
        self.assertEqual(array.dtype, np.bool_)
        self.assertTrue(np.array_equal(array, np.array([True, False])))

    def test_equality(self):
        self.assertEqual(BitVector([1, 0]), BitVector([True, False]))
        self.assertNotEqual(BitVector([1]), BitVector([0]))

if __name__ == '__main__':
    unittest.main()
