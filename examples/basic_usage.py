"""Basic usage example for dbfstream.

This example demonstrates:
1. Reading a table header
2. Streaming records from a file
3. Feeding chunks to a RecordAssembler by hand
"""

from __future__ import annotations

import struct
import tempfile
from pathlib import Path

from dbfstream import Parser, RecordAssembler


def build_sample_table() -> bytes:
    """Build a small table with a name and a quantity column."""
    fields = [(b"NAME", b"C", 8), (b"QTY", b"N", 4)]
    descriptors = b"".join(
        struct.pack("<11sciBB13xB", name, type_tag, 0, length, 0, 0)
        for name, type_tag, length in fields
    )
    header_length = 32 + len(descriptors) + 1
    record_length = 1 + sum(length for _, _, length in fields)
    base = struct.pack("<B3sihh20x", 0x03, b"\x7b\x0a\x13", 3, header_length, record_length)

    records = [
        b" " + b"bolts   " + b" 120",
        b" " + b"nuts    " + b"  75",
        b"*" + b"washers " + b"    ",
    ]
    return base + descriptors + b"\x0d" + b"".join(records) + b"\x1a"


def main() -> None:
    """Run basic usage examples."""
    data = build_sample_table()

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "stock.dbf"
        path.write_bytes(data)

        # Example 1: Header
        print("=" * 60)
        print("Example 1: Header")
        print("=" * 60)
        parser = Parser(path)
        header = parser.header
        print(f"Records: {header.number_of_records}, record length: {header.record_length}")
        for field in header.fields:
            print(f"  {field.name:<10} {field.type} {field.length}")
        print()

        # Example 2: Streaming records
        print("=" * 60)
        print("Example 2: Streaming records")
        print("=" * 60)
        for record in Parser(path, chunk_size=4):
            status = "deleted" if record.deleted else "active"
            print(f"  #{record.sequence_number} {record['NAME']:<8} {record['QTY']!r:>6} ({status})")
        print()

    # Example 3: Feeding chunks by hand
    print("=" * 60)
    print("Example 3: RecordAssembler")
    print("=" * 60)
    assembler = RecordAssembler(header)
    for start in range(0, len(data), 16):
        for record in assembler.feed(data[start : start + 16]):
            print(f"  chunk @{start:3}: {record.to_dict()}")
    assembler.close()


if __name__ == "__main__":
    main()
