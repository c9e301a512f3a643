"""Header inspection and record dump CLI commands."""

from __future__ import annotations

import itertools
import json
import math
from pathlib import Path
from typing import Any, Optional

from ..models.header import Header
from ..parser import Parser
from ..utils.layout import declared_record_length, expected_file_size, field_offsets, layout_slack


def analyze_file(file_path: Path) -> None:
    """Print the header and record layout of a table.

    Args:
        file_path: Path to the table
    """
    parser = Parser(file_path)
    analyze_header(parser.header, file_size=file_path.stat().st_size)


def analyze_header(header: Header, file_size: Optional[int] = None) -> None:
    """Print a detailed breakdown of a decoded header.

    Args:
        header: Header to describe
        file_size: Actual size of the file, compared against the declared size
    """
    print("|" * 7, "dbfstream: dBase table decoder", "|" * 7)
    print(f"Version: 0x{header.version:02X}")
    print(f"Last updated: {header.date_updated.isoformat()}")
    print(f"Records: {header.number_of_records}")
    print(f"Header length: {header.header_length} bytes")
    print(f"Record length: {header.record_length} bytes")

    expected = expected_file_size(header)
    if file_size is not None:
        print(f"File size: {file_size} bytes (header + records = {expected})")
        if file_size < expected:
            print(f"        truncated by {expected - file_size} bytes")
    print()

    # Field section
    offsets = field_offsets(header)
    print(f"{'-' * 27} Fields {'-' * 27}")
    for i, field in enumerate(header.fields, 1):
        start, end = offsets.get(field.name, (0, 0))
        field_desc = f"{i}. {field.name}"
        field_info = f"{field.type}({field.length}"
        if field.decimal_places:
            field_info += f",{field.decimal_places}"
        field_info += f") @{start}-{end}"
        dots = "." * max(1, 54 - len(field_desc) - len(field_info))
        print(f"        {field_desc}{dots}{field_info}")
    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Field layout: {declared_record_length(header)} bytes per record")
    slack = layout_slack(header)
    if slack > 0:
        print(f"        unused trailing bytes{'.' * 18}{slack}")
    elif slack < 0:
        print(f"        bytes cut from trailing fields{'.' * 9}{-slack}")
    print()


def dump_records(
    file_path: Path, *, parse_types: bool = True, limit: Optional[int] = None
) -> int:
    """Print records as JSON lines.

    Args:
        file_path: Path to the table
        parse_types: Coerce numeric fields to numbers
        limit: Maximum number of records to print

    Returns:
        Number of records printed
    """
    parser = Parser(file_path, parse_types=parse_types)
    records = parser.records()
    if limit is not None:
        records = itertools.islice(records, limit)

    count = 0
    for record in records:
        row = {key: _null_nan(value) for key, value in record.to_dict().items()}
        print(json.dumps(row, default=_json_default, allow_nan=False))
        count += 1
    return count


def _null_nan(value: Any) -> Any:
    # JSON has no NaN; blank numeric fields become null
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def _json_default(value: Any) -> Any:
    if isinstance(value, bytes):
        return value.hex()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
