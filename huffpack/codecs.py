import os
from typing import IO, List, Optional

from .bits import BitVector, pack_bits
from .coders import HuffmanCoder
from .errors import EmptyInputError, SymbolRangeError
from .frequency import FrequencyCounter
from .logger import Logger, Log, LogLevel, ContainerWriteLog
from .models import CodeTable, FrequencyTable
from .preprocessors import EncodedTextPreprocessor, TextPreprocessor
from .settings import DEFAULT_TEXT_ENCODING, MAX_CODE_LENGTH, MAX_SYMBOL_VALUE, HuffmanCoderSettings
from .validators import validate_file_exists, validate_type, validate_writable


class CompressedContainer:
    """Represents the code table and payload of a compressed text."""

    def __init__(
        self,
        code_table: CodeTable,
        payload: bytes,
        payload_bit_length: Optional[int] = None,
        frequency_table: Optional[FrequencyTable] = None,
    ) -> None:
        validate_type(code_table, "Code table", CodeTable)
        validate_type(payload, "Payload", bytes)
        if frequency_table is not None:
            validate_type(frequency_table, "Frequency table", FrequencyTable)
        if payload_bit_length is not None:
            validate_type(payload_bit_length, "Payload bit length", int)
            if payload_bit_length < 0 or (payload_bit_length + 7) // 8 != len(payload):
                raise ValueError("Payload bit length does not match the payload size")

        for symbol, code in code_table.items():
            if symbol.value > MAX_SYMBOL_VALUE:
                raise SymbolRangeError(
                    f"Symbol {symbol} has code point {symbol.value}, container records hold at most {MAX_SYMBOL_VALUE}"
                )
            if len(code) > MAX_CODE_LENGTH:
                raise SymbolRangeError(f"Code of symbol {symbol} is longer than {MAX_CODE_LENGTH} bits")

        self.code_table = code_table
        self.payload = payload
        self.payload_bit_length = payload_bit_length
        self.frequency_table = frequency_table

    @property
    def table_size(self) -> int:
        """Number of bytes taken by the serialized code table."""
        return sum(2 + (len(code) + 7) // 8 for _, code in self.code_table.items())

    @property
    def size(self) -> int:
        return self.table_size + len(self.payload)

    @staticmethod
    def serialize_table(code_table: CodeTable) -> bytes:
        """
        Serialize the code table records, ordered by code point.

        Each record:
          - symbol code point (1 byte)
          - code length in bits (1 byte)
          - code bits packed on their own, zero padded (ceil(length / 8) bytes)
        """
        serialized = bytearray()
        for symbol, code in code_table.get_sorted_items():
            serialized.append(symbol.value)
            serialized.append(len(code))
            serialized += pack_bits(code)
        return bytes(serialized)

    @staticmethod
    def serialize(container: 'CompressedContainer') -> bytes:
        """
        Serialize a CompressedContainer instance into bytes.

        The format:
          - code table records (see serialize_table)
          - payload (variable length)

        There is no record count, no separator and no payload bit length.
        """
        validate_type(container, "Container", CompressedContainer)
        return CompressedContainer.serialize_table(container.code_table) + container.payload


class CompressedContainerFile:
    """Static class for writing a CompressedContainer instance to a stream or file."""

    @staticmethod
    def write_to_stream(container: CompressedContainer, stream: IO[bytes]) -> int:
        """
        Write the serialized container to an open binary stream.

        Returns:
            int: Number of bytes written.
        """
        validate_type(container, "Container", CompressedContainer)
        validate_writable(stream)
        serialized_data = CompressedContainer.serialize(container)
        stream.write(serialized_data)
        return len(serialized_data)

    @staticmethod
    def write_to_file(container: CompressedContainer, file_path: str, logger: Optional[Logger] = None) -> int:
        """
        Serialize the container and write it as binary data to the given file.

        Errors from opening or writing the file propagate unchanged; a partly
        written file is left in place.

        Returns:
            int: Number of bytes written.
        """
        validate_type(container, "Container", CompressedContainer)
        validate_type(file_path, "File path", str)
        try:
            with open(file_path, "wb") as file:
                byte_count = CompressedContainerFile.write_to_stream(container, file)
        except OSError as error:
            if logger is not None:
                logger.log(Log("Container_write_error", LogLevel.ERROR, f"Writing {file_path} failed: {error}"))
            raise
        if logger is not None:
            logger.log(ContainerWriteLog(file_path, byte_count))
        return byte_count


class HuffmanCodec:
    def compress(
        self,
        text: str,
        settings: Optional[HuffmanCoderSettings] = None,
        logger: Optional[Logger] = None,
    ) -> CompressedContainer:
        """
        Compress the input text.

        Args:
            text (str): The text to compress.
            settings (Optional[HuffmanCoderSettings]): Coder settings.
            logger: Logger instance for logging.

        Returns:
            CompressedContainer: The code table and packed payload.

        Raises:
            EmptyInputError: If the text is empty.
        """
        validate_type(text, "Text", str)
        symbols = TextPreprocessor(logger).convert_to_symbols(text)
        return self._compress_symbols(symbols, settings, logger)

    def compress_to_bytes(
        self,
        text: str,
        settings: Optional[HuffmanCoderSettings] = None,
        logger: Optional[Logger] = None,
    ) -> bytes:
        """Compress the input text and return the serialized container."""
        return CompressedContainer.serialize(HuffmanCodec.compress(self, text, settings, logger))

    def _compress_symbols(self, symbols: List, settings: Optional[HuffmanCoderSettings], logger: Optional[Logger]) -> CompressedContainer:
        if not symbols:
            if logger is not None:
                logger.log(Log("Codec_error", LogLevel.ERROR, "Nothing to compress: input is empty"))
            raise EmptyInputError()

        frequency_table = FrequencyCounter(logger).count(symbols)
        coder = HuffmanCoder(settings, logger)
        _, code_table = coder.build_code_table(frequency_table)
        bits: BitVector = coder.encode(symbols, code_table)
        try:
            return CompressedContainer(code_table, bits.pack(), bits.bit_length, frequency_table)
        except SymbolRangeError as error:
            if logger is not None:
                logger.log(Log("Codec_error", LogLevel.ERROR, f"Cannot store the code table: {error}"))
            raise


class HuffmanCodecFile(HuffmanCodec):
    def compress(
        self,
        input_path: str,
        output_path: str,
        encoding: str = DEFAULT_TEXT_ENCODING,
        settings: Optional[HuffmanCoderSettings] = None,
        logger: Optional[Logger] = None,
    ) -> CompressedContainer:
        """
        Compress a text file and write the container to an output file.

        The input is read and fully compressed before the output file is
        opened, so invalid input never leaves an output file behind.

        Args:
            input_path (str): Path to the input text file.
            output_path (str): Path to the output file.
            encoding (str): Text encoding of the input file.
            settings (Optional[HuffmanCoderSettings]): Coder settings.
            logger: Logger instance for logging.

        Returns:
            CompressedContainer: The container that was written.
        """
        validate_type(input_path, "Input path", str)
        validate_type(output_path, "Output path", str)
        validate_file_exists(input_path)
        if os.path.isdir(input_path):
            raise ValueError(f"Input path is a directory: {input_path}")

        with open(input_path, "rb") as file:
            data = file.read()

        symbols = EncodedTextPreprocessor(encoding, logger).convert_to_symbols(data)
        container = self._compress_symbols(symbols, settings, logger)
        CompressedContainerFile.write_to_file(container, output_path, logger)
        return container
