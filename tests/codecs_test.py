import io
import os
import tempfile
import unittest

from huffpack.codecs import CompressedContainer, CompressedContainerFile, HuffmanCodec, HuffmanCodecFile
from huffpack.models import Symbol, CodeTable
from huffpack.settings import HuffmanCoderSettings
from huffpack.errors import EmptyInputError, SymbolRangeError
from huffpack.logger import Logger, ContainerWriteLog, LogLevel

ABRACADABRA_TABLE = bytes([
    0x61, 1, 0x00,
    0x62, 3, 0xC0,
    0x63, 3, 0x80,
    0x64, 3, 0xA0,
    0x72, 3, 0xE0,
])
ABRACADABRA_PAYLOAD = bytes([0x6E, 0x8A, 0xDC])

class TestCompressedContainer(unittest.TestCase):
    def test_serialize(self):
        table = CodeTable({Symbol('b'): (True, False), Symbol('a'): (False,)})
        container = CompressedContainer(table, b"\x40", 2)
        self.assertEqual(CompressedContainer.serialize(container), bytes([0x61, 1, 0x00, 0x62, 2, 0x80, 0x40]))
        self.assertEqual(container.table_size, 6)
        self.assertEqual(container.size, 7)

    def test_long_code_uses_several_bytes(self):
        code = (True,) * 9
        container = CompressedContainer(CodeTable({Symbol('x'): code}), b"")
        self.assertEqual(CompressedContainer.serialize(container), bytes([0x78, 9, 0xFF, 0x80]))

    def test_empty_code_has_no_code_bytes(self):
        container = CompressedContainer(CodeTable({Symbol('a'): ()}), b"", 0)
        self.assertEqual(CompressedContainer.serialize(container), b"a\x00")

    def test_symbol_out_of_range(self):
        with self.assertRaises(SymbolRangeError):
            CompressedContainer(CodeTable({Symbol('中'): (False,), Symbol('a'): (True,)}), b"")

    def test_code_too_long(self):
        with self.assertRaises(SymbolRangeError):
            CompressedContainer(CodeTable({Symbol('a'): (True,) * 256}), b"")

    def test_bit_length_mismatch(self):
        table = CodeTable({Symbol('a'): (False,)})
        with self.assertRaises(ValueError):
            CompressedContainer(table, b"\x00", 9)
        with self.assertRaises(ValueError):
            CompressedContainer(table, b"", -1)

    def test_invalid_types(self):
        with self.assertRaises(ValueError):
            CompressedContainer({}, b"")
        with self.assertRaises(ValueError):
            CompressedContainer(CodeTable(), "payload")

class TestCompressedContainerFile(unittest.TestCase):
    def setUp(self):
        self.container = HuffmanCodec().compress("abracadabra")

    def test_write_to_stream(self):
        stream = io.BytesIO()
        count = CompressedContainerFile.write_to_stream(self.container, stream)
        self.assertEqual(stream.getvalue(), ABRACADABRA_TABLE + ABRACADABRA_PAYLOAD)
        self.assertEqual(count, 18)

    def test_write_to_closed_stream(self):
        stream = io.BytesIO()
        stream.close()
        with self.assertRaises(ValueError):
            CompressedContainerFile.write_to_stream(self.container, stream)

    def test_write_to_file(self):
        logger = Logger()
        with tempfile.TemporaryDirectory() as folder:
            path = os.path.join(folder, "out.huff")
            count = CompressedContainerFile.write_to_file(self.container, path, logger)
            with open(path, "rb") as file:
                self.assertEqual(file.read(), ABRACADABRA_TABLE + ABRACADABRA_PAYLOAD)
        self.assertEqual(count, 18)
        self.assertEqual(logger.get_logs(ContainerWriteLog)[0].byte_count, 18)

    def test_io_failure_propagates(self):
        logger = Logger()
        logger.display_error = False
        with tempfile.TemporaryDirectory() as folder:
            path = os.path.join(folder, "missing", "out.huff")
            with self.assertRaises(OSError):
                CompressedContainerFile.write_to_file(self.container, path, logger)
        self.assertIn("Writing", logger.logs[-1].message)

class TestHuffmanCodec(unittest.TestCase):
    def setUp(self):
        self.codec = HuffmanCodec()

    def test_abracadabra(self):
        container = self.codec.compress("abracadabra")
        self.assertEqual(container.payload, ABRACADABRA_PAYLOAD)
        self.assertEqual(container.payload_bit_length, 23)
        self.assertEqual(container.frequency_table.get_frequency(Symbol('a')), 5)
        self.assertEqual(self.codec.compress_to_bytes("abracadabra"), ABRACADABRA_TABLE + ABRACADABRA_PAYLOAD)

    def test_deterministic_output(self):
        text = "she sells sea shells by the sea shore"
        self.assertEqual(self.codec.compress_to_bytes(text), self.codec.compress_to_bytes(text))
        self.assertEqual(self.codec.compress(text).payload, self.codec.compress(text).payload)

    def test_single_symbol(self):
        container = self.codec.compress("aaaa")
        self.assertEqual(container.payload, b"")
        self.assertEqual(container.payload_bit_length, 0)
        self.assertEqual(container.code_table.get_code(Symbol('a')), ())
        self.assertEqual(CompressedContainer.serialize(container), b"a\x00")

    def test_single_symbol_one_bit(self):
        settings = HuffmanCoderSettings(single_symbol_code_length=1)
        container = self.codec.compress("aaaa", settings)
        self.assertEqual(container.payload, b"\x00")
        self.assertEqual(container.payload_bit_length, 4)
        self.assertEqual(CompressedContainer.serialize(container), b"a\x01\x00\x00")

    def test_empty_input(self):
        with self.assertRaises(EmptyInputError):
            self.codec.compress("")

    def test_symbol_out_of_range(self):
        with self.assertRaises(SymbolRangeError):
            self.codec.compress("日本")

    def test_symbol_out_of_range_is_logged(self):
        logger = Logger()
        logger.display_error = False
        with self.assertRaises(SymbolRangeError):
            self.codec.compress("日本", logger=logger)
        self.assertEqual(logger.logs[-1].level, LogLevel.ERROR)
        self.assertIn("code table", logger.logs[-1].message)

    def test_empty_input_is_logged(self):
        logger = Logger()
        logger.display_error = False
        with self.assertRaises(EmptyInputError):
            self.codec.compress("", logger=logger)
        self.assertEqual(logger.logs[-1].level, LogLevel.ERROR)

    def test_invalid_input(self):
        with self.assertRaises(ValueError):
            self.codec.compress(b"bytes")

class TestHuffmanCodecFile(unittest.TestCase):
    def setUp(self):
        self.folder = tempfile.TemporaryDirectory()
        self.input_path = os.path.join(self.folder.name, "input.txt")
        self.output_path = os.path.join(self.folder.name, "input.txt.huff")

    def tearDown(self):
        self.folder.cleanup()

    def write_input(self, data):
        with open(self.input_path, "wb") as file:
            file.write(data)

    def test_compress(self):
        self.write_input(b"abracadabra")
        container = HuffmanCodecFile().compress(self.input_path, self.output_path)
        with open(self.output_path, "rb") as file:
            self.assertEqual(file.read(), ABRACADABRA_TABLE + ABRACADABRA_PAYLOAD)
        self.assertEqual(container.payload_bit_length, 23)

    def test_compress_to_bytes_on_file_codec(self):
        self.assertEqual(HuffmanCodecFile().compress_to_bytes("abracadabra"), ABRACADABRA_TABLE + ABRACADABRA_PAYLOAD)

    def test_latin1_input(self):
        self.write_input("ééa".encode("latin-1"))
        container = HuffmanCodecFile().compress(self.input_path, self.output_path, encoding="latin-1")
        self.assertTrue(container.code_table.contains(Symbol('é')))

    def test_empty_input_writes_no_file(self):
        self.write_input(b"")
        logger = Logger()
        logger.display_error = False
        with self.assertRaises(EmptyInputError):
            HuffmanCodecFile().compress(self.input_path, self.output_path, logger=logger)
        self.assertFalse(os.path.exists(self.output_path))

    def test_out_of_range_writes_no_file(self):
        self.write_input("中文".encode("utf-8"))
        with self.assertRaises(SymbolRangeError):
            HuffmanCodecFile().compress(self.input_path, self.output_path)
        self.assertFalse(os.path.exists(self.output_path))

    def test_missing_input(self):
        with self.assertRaises(ValueError):
            HuffmanCodecFile().compress(os.path.join(self.folder.name, "nope.txt"), self.output_path)

    def test_input_is_directory(self):
        with self.assertRaises(ValueError):
            HuffmanCodecFile().compress(self.folder.name, self.output_path)

if __name__ == '__main__':
    unittest.main()
