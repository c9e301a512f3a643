"""dbfstream: streaming decoder for dBase-style tables

A Python library that decodes fixed-width binary tables (a header describing
the fields, followed by fixed-length records) into typed records, reading the
file incrementally instead of loading it into memory.

Key Features:
- Header and field descriptor decoding
- Chunk-size independent record reassembly
- Space-trimmed text fields, optional numeric coercion (blank numbers decode to NaN)
- Per-field raw byte access
- Pydantic-validated options

Quick Start:
    >>> from dbfstream import Parser
    >>>
    >>> parser = Parser("people.dbf")
    >>> parser.header.number_of_records
    2
    >>> for record in parser:
    ...     print(record.sequence_number, record.deleted, record["NAME"])
    1 False name1
    2 True name2
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import RecordAssembler, decode_field, decode_record, iter_records, read_header
from .exceptions import DbfStreamError, DecodeError, HeaderError, MalformedHeaderError
from .models import FieldDescriptor, Header, ParserOptions, Record
from .parser import Parser, parse_file

__all__ = [
    # Core API
    "Parser",
    "parse_file",
    "ParserOptions",
    # Types
    "Header",
    "FieldDescriptor",
    "Record",
    # Codec
    "read_header",
    "decode_field",
    "decode_record",
    "RecordAssembler",
    "iter_records",
    # Exceptions
    "DbfStreamError",
    "HeaderError",
    "MalformedHeaderError",
    "DecodeError",
    # Version
    "__version__",
]
