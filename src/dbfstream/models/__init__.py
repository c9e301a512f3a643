"""Value types for dbfstream.

This module provides the header, field descriptor and record types produced by
the decoder, plus the Pydantic options model that configures it.
"""

from __future__ import annotations

from .header import NUMERIC_TYPES, FieldDescriptor, Header
from .options import DEFAULT_CHUNK_SIZE, ParserOptions
from .record import Record

__all__ = [
    "FieldDescriptor",
    "Header",
    "NUMERIC_TYPES",
    "ParserOptions",
    "DEFAULT_CHUNK_SIZE",
    "Record",
]
