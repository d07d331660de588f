"""Errors raised while loading and decoding MRR files.

Every error aborts the whole decode. ``user_message`` is the short text a host
application shows when an import fails.
"""

from pathlib import Path
from typing import Union


class MrrError(Exception):
    """Base class for all MRR loading errors."""

    user_message = "corrupt file"


class IoError(MrrError):
    """The file could not be read."""

    user_message = "could not open file"

    def __init__(self, path: Union[str, Path], cause: OSError):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"could not read '{self.path}': {cause}")


class FormatSignatureMismatch(MrrError):
    """The buffer does not start with the MRR signature."""

    user_message = "not a valid assembly file"


class UnexpectedEof(MrrError):
    """A read went past the end of the buffer."""

    user_message = "corrupt or incomplete file"

    def __init__(self, position: int, requested: int, remaining: int):
        self.position = position
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"needed {requested} bytes at offset {position}, only {remaining} remain"
        )


class LengthOverflow(MrrError):
    """A sequence length times its element width is not a representable size."""

    user_message = "corrupt file"

    def __init__(self, length: int, element_width: int):
        self.length = length
        self.element_width = element_width
        super().__init__(
            f"sequence of {length} elements of {element_width} bytes overflows"
        )


class InvalidUtf8(MrrError):
    """A part name is not valid UTF-8."""

    user_message = "corrupt file"


class UnknownJointType(MrrError):
    """A joint type discriminant outside {0, 1, 2}."""

    user_message = "unsupported or corrupt file"

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"unknown joint type {value}")
