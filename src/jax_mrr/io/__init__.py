"""I/O utilities for loading MRR assembly files.

This module provides functions for decoding the MRR binary format and
converting it to JAX-native data structures.
"""

from .errors import (
    FormatSignatureMismatch,
    InvalidUtf8,
    IoError,
    LengthOverflow,
    MrrError,
    UnexpectedEof,
    UnknownJointType,
)
from .mrr_parser import FORMAT_SIGNATURE, decode, load, load_assembly

__all__ = [
    "FORMAT_SIGNATURE",
    "decode",
    "load",
    "load_assembly",
    "MrrError",
    "IoError",
    "FormatSignatureMismatch",
    "UnexpectedEof",
    "LengthOverflow",
    "InvalidUtf8",
    "UnknownJointType",
]
