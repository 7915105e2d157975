"""csscompress: selector normalization stage of a stylesheet compressor."""
from __future__ import annotations

from csscompress.config import DEFAULT_TOKEN, MODES, SelectorOptions
from csscompress.errors import CompressionError, UnknownOperationError, UnknownOptionError
from csscompress.selectors import Operation, SelectorProcessor, access, release, selectors

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TOKEN",
    "MODES",
    "SelectorOptions",
    "CompressionError",
    "UnknownOperationError",
    "UnknownOptionError",
    "Operation",
    "SelectorProcessor",
    "access",
    "release",
    "selectors",
]
