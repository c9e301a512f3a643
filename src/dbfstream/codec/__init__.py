"""Streaming codec for fixed-width dBase-style tables.

This module provides header decoding, field and record decoding, and the
incremental assembler that turns byte chunks into records.
"""

from __future__ import annotations

from .fields import decode_field, parse_number, trim_spaces
from .header import (
    decode_base_header,
    decode_field_descriptor,
    decode_field_descriptors,
    decode_header_date,
    read_header,
)
from .record import decode_record
from .stream import AssemblerState, RecordAssembler, iter_records

__all__ = [
    "read_header",
    "decode_base_header",
    "decode_field_descriptor",
    "decode_field_descriptors",
    "decode_header_date",
    "decode_field",
    "parse_number",
    "trim_spaces",
    "decode_record",
    "AssemblerState",
    "RecordAssembler",
    "iter_records",
]
