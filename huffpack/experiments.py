#experiments.py
import os
import time
from typing import Optional

import numpy as np

from .codecs import CompressedContainer, HuffmanCodecFile
from .logger import Logger
from .models import FrequencyTable
from .preprocessors import EncodedTextPreprocessor
from .settings import COMPRESSED_FILE_EXTENSION, DEFAULT_TEXT_ENCODING, HuffmanCoderSettings
from .validators import validate_type


def shannon_entropy(frequency_table: FrequencyTable) -> float:
    """Entropy of the symbol distribution in bits per symbol."""
    validate_type(frequency_table, "Frequency table", FrequencyTable)
    counts = np.array([frequency for _, frequency in frequency_table.items()], dtype=np.float64)
    if counts.size == 0:
        return 0.0
    probabilities = counts / counts.sum()
    return float(-(probabilities * np.log2(probabilities)).sum())


class CompressionReport:
    def __init__(self, symbol_count: int, input_size: int, table_size: int, payload_size: int,
                 payload_bit_length: int, entropy: float) -> None:
        self.symbol_count = symbol_count
        self.input_size = input_size
        self.table_size = table_size
        self.payload_size = payload_size
        self.payload_bit_length = payload_bit_length
        self.entropy = entropy

    @property
    def compressed_size(self) -> int:
        return self.table_size + self.payload_size

    @property
    def compression_ratio(self) -> float:
        if self.compressed_size == 0:
            return float("inf")
        return self.input_size / self.compressed_size

    @property
    def average_code_length(self) -> float:
        if self.symbol_count == 0:
            return 0.0
        return self.payload_bit_length / self.symbol_count

    @property
    def efficiency(self) -> float:
        """Entropy over average code length; 1.0 for an optimal code on dyadic distributions."""
        if self.average_code_length == 0:
            return 1.0
        return self.entropy / self.average_code_length

    @staticmethod
    def from_container(text: str, container: CompressedContainer,
                       encoding: str = DEFAULT_TEXT_ENCODING) -> 'CompressionReport':
        validate_type(text, "Text", str)
        validate_type(container, "Container", CompressedContainer)
        if container.frequency_table is None or container.payload_bit_length is None:
            raise ValueError("Container must carry its frequency table and payload bit length")

        return CompressionReport(
            symbol_count=container.frequency_table.get_total(),
            input_size=len(text.encode(encoding)),
            table_size=container.table_size,
            payload_size=len(container.payload),
            payload_bit_length=container.payload_bit_length,
            entropy=shannon_entropy(container.frequency_table),
        )

    def __str__(self) -> str:
        return (
            f"Symbols: {self.symbol_count}, Input size: {self.input_size}, "
            f"Compressed size: {self.compressed_size} (table {self.table_size}, payload {self.payload_size}), "
            f"Ratio: {self.compression_ratio:.3f}, Average code length: {self.average_code_length:.3f}, "
            f"Entropy: {self.entropy:.3f}, Efficiency: {self.efficiency:.3f}"
        )


class HuffmanExperiment:
    def __init__(self, name: str, input_file_path: str, experiment_root_folder_path: str,
                 encoding: str = DEFAULT_TEXT_ENCODING, settings: Optional[HuffmanCoderSettings] = None):

        self.name = name

        #validate that input file exists and can be read
        if not os.path.exists(input_file_path):
            raise FileNotFoundError(f"File {input_file_path} not found.")
        if not os.access(input_file_path, os.R_OK):
            raise PermissionError(f"File {input_file_path} is not readable.")

        self.input_file_path = input_file_path
        self.encoding = encoding
        self.settings = settings

        self.experiment_folder_path = os.path.join(experiment_root_folder_path, name)
        if not os.path.exists(self.experiment_folder_path):
            os.makedirs(self.experiment_folder_path)

        input_file_name = os.path.basename(input_file_path)
        self.compressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}{COMPRESSED_FILE_EXTENSION}")
        self.log_file_path = os.path.join(self.experiment_folder_path, f"{name}_logs.txt")

        self.logger = Logger()
        self.codec = HuffmanCodecFile()
        self.report: Optional[CompressionReport] = None

    def run(self) -> CompressionReport:
        self.compression_start_time = time.time()
        container = self.codec.compress(self.input_file_path, self.compressed_file_path, self.encoding, self.settings, self.logger)
        self.compression_end_time = time.time()
        self.compression_time = self.compression_end_time - self.compression_start_time

        self.compressed_file_size = os.path.getsize(self.compressed_file_path)
        with open(self.input_file_path, "rb") as file:
            text = EncodedTextPreprocessor(self.encoding).decode(file.read())
        self.report = CompressionReport.from_container(text, container, self.encoding)

        self.logger.log(f"{self.name}: {self.report}, Time: {self.compression_time:.4f}s")
        self.logger.save(self.log_file_path)
        return self.report
