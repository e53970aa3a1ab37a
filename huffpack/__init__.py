"""
huffpack: A Python library for Huffman compression of text into a compact code table and bit-packed payload.
"""

from .codecs import (
    CompressedContainer,
    CompressedContainerFile,
    HuffmanCodec,
    HuffmanCodecFile,
)

from .coders import (
    CoderBase,
    HuffmanCoder,
    generate_codes,
    get_coder,
)

from .bits import (
    BitVector,
    pack_bits,
)

from .tree import (
    HuffmanNode,
    HuffmanLeaf,
    HuffmanInternal,
    build_tree,
)

from .frequency import (
    FrequencyCounter,
    count_frequencies,
)

from .models import (
    Symbol,
    SymbolFrequency,
    FrequencyTable,
    CodeTable,
)

from .errors import (
    EmptyInputError,
    MissingCodeError,
    SymbolRangeError,
)

from .preprocessors import (
    BasePreprocessor,
    TextPreprocessor,
    EncodedTextPreprocessor,
    get_preprocessor,
)

from .settings import HuffmanCoderSettings

from .logger import (
    Logger,
    Log,
    LogLevel,
    SymbolFrequencyLog,
    CodeAssignmentLog,
    CodingLog,
    ContainerWriteLog,
    CountingProgressStep,
    TreeBuildingProgressStep,
    CodingProgressStep,
)

from .experiments import (
    CompressionReport,
    HuffmanExperiment,
    shannon_entropy,
)

# Validators
from .validators import *

__all__ = [

    "CompressedContainer",
    "CompressedContainerFile",
    "HuffmanCodec",
    "HuffmanCodecFile",

    "CoderBase",
    "HuffmanCoder",
    "generate_codes",
    "get_coder",

    "BitVector",
    "pack_bits",

    "HuffmanNode",
    "HuffmanLeaf",
    "HuffmanInternal",
    "build_tree",

    "FrequencyCounter",
    "count_frequencies",

    "Symbol",
    "SymbolFrequency",
    "FrequencyTable",
    "CodeTable",

    "EmptyInputError",
    "MissingCodeError",
    "SymbolRangeError",

    "BasePreprocessor",
    "TextPreprocessor",
    "EncodedTextPreprocessor",
    "get_preprocessor",

    "HuffmanCoderSettings",

    "Logger",
    "Log",
    "LogLevel",
    "SymbolFrequencyLog",
    "CodeAssignmentLog",
    "CodingLog",
    "ContainerWriteLog",
    "CountingProgressStep",
    "TreeBuildingProgressStep",
    "CodingProgressStep",

    "CompressionReport",
    "HuffmanExperiment",
    "shannon_entropy",
]
