"""
validators.py

Shared codes for input validation in huffpack.
"""


import os
import numpy as np
from typing import Any

def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_file_exists(file_path: str) -> None:
    """Validate that the given file path exists."""
    if not os.path.exists(file_path):
        raise ValueError(f"File does not exist: {file_path}")


def validate_bit(bit: Any) -> bool:
    """Validate a single bit and return it as a bool."""
    if isinstance(bit, (bool, np.bool_)):
        return bool(bit)
    if isinstance(bit, (int, np.integer)) and bit in (0, 1):
        return bool(bit)
    raise ValueError("Bit must be 0, 1, True or False")


def validate_writable(stream: Any, name: str = "Output stream") -> None:
    """Validate that stream is an open object accepting writes."""
    if not callable(getattr(stream, "write", None)):
        raise ValueError(f"{name} must provide a write method")
    if getattr(stream, "closed", False):
        raise ValueError(f"{name} is closed")
