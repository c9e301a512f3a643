"""Unit tests for the streaming record assembler."""

from __future__ import annotations

import io
import math
from typing import List

import pytest

from dbfstream import DecodeError, Header, Record, RecordAssembler, iter_records, read_header
from dbfstream.codec.stream import AssemblerState
from dbf_tables import NAME_FIELDS, NAME_RECORDS, build_table


def header_of(data: bytes) -> Header:
    return read_header(io.BytesIO(data))


def feed_all(assembler: RecordAssembler, data: bytes, chunk_size: int) -> List[Record]:
    records: List[Record] = []
    for start in range(0, len(data), chunk_size):
        records.extend(assembler.feed(data[start : start + chunk_size]))
    assembler.close()
    return records


class TestNameScenario:
    """Test the two-record single-field table."""

    def test_single_chunk(self, name_table: bytes) -> None:
        """Test the whole file as one chunk."""
        records = RecordAssembler(header_of(name_table)).feed(name_table)

        assert [r.to_dict() for r in records] == [
            {"@sequenceNumber": 1, "@deleted": False, "name": "name1"},
            {"@sequenceNumber": 2, "@deleted": True, "name": "name2"},
        ]

    def test_single_byte_chunks(self, name_table: bytes) -> None:
        """Test one-byte chunks produce the same records."""
        header = header_of(name_table)
        whole = RecordAssembler(header).feed(name_table)
        bytewise = feed_all(RecordAssembler(header), name_table, 1)

        assert bytewise == whole

    def test_truncated_second_record(self, name_table: bytes) -> None:
        """Test a source ending inside the second record."""
        header = header_of(name_table)
        truncated = name_table[: header.header_length + header.record_length + 4]

        assembler = RecordAssembler(header)
        records = assembler.feed(truncated)
        assembler.close()

        assert len(records) == 1
        assert records[0]["name"] == "name1"
        assert assembler.exhausted


class TestHeaderSkip:
    """Test skipping of the header region."""

    def test_header_only_chunks_emit_nothing(self, name_table: bytes) -> None:
        """Test chunks inside the header emit no records."""
        header = header_of(name_table)
        assembler = RecordAssembler(header)

        assert assembler.state is AssemblerState.SKIPPING_HEADER
        assert assembler.feed(name_table[:20]) == []
        assert assembler.feed(name_table[20 : header.header_length]) == []
        assert assembler.state is AssemblerState.DECODING

        records = assembler.feed(name_table[header.header_length :])
        assert [r.sequence_number for r in records] == [1, 2]

    def test_chunk_spanning_header_and_record(self, name_table: bytes) -> None:
        """Test a chunk that ends the header and starts a record."""
        header = header_of(name_table)
        split = header.header_length + 3
        assembler = RecordAssembler(header)

        assert assembler.feed(name_table[:split]) == []
        assert assembler.state is AssemblerState.DECODING
        records = assembler.feed(name_table[split:])
        assert [r["name"] for r in records] == ["name1", "name2"]


class TestRecordBudget:
    """Test the declared record budget limits decoding."""

    def test_extra_records_ignored(self) -> None:
        """Test records beyond the declared count are never decoded."""
        data = build_table(NAME_FIELDS, NAME_RECORDS + [b" name3    "], number_of_records=2)
        assembler = RecordAssembler(header_of(data))

        records = assembler.feed(data)

        assert [r["name"] for r in records] == ["name1", "name2"]
        assert assembler.bytes_decoded == 2 * 10
        assert assembler.exhausted

    def test_feed_after_exhaustion(self, name_table: bytes) -> None:
        """Test trailing bytes after the budget are ignored."""
        assembler = RecordAssembler(header_of(name_table))
        assembler.feed(name_table)

        assert assembler.feed(b" name9    ") == []
        assert assembler.records_emitted == 2

    def test_eof_marker_ignored(self, name_table: bytes) -> None:
        """Test the end-of-file marker after the last record is not decoded."""
        assert name_table.endswith(b"\x1a")
        records = feed_all(RecordAssembler(header_of(name_table)), name_table, 3)

        assert len(records) == 2

    def test_empty_table(self) -> None:
        """Test a table declaring no records."""
        data = build_table(NAME_FIELDS, [])
        assembler = RecordAssembler(header_of(data))

        assert assembler.feed(data) == []
        assert assembler.exhausted


class TestRecordGeometry:
    """Test record slicing within the stream."""

    def test_record_length_larger_than_fields(self) -> None:
        """Test unused trailing bytes in each record are skipped."""
        records = [b" abc  XX", b" def  YY"]
        data = build_table([("code", "C", 5, 0)], records, record_length=8)

        decoded = feed_all(RecordAssembler(header_of(data)), data, 5)

        assert [r["code"] for r in decoded] == ["abc", "def"]

    def test_fields_longer_than_record(self) -> None:
        """Test decoding stops at the record boundary."""
        records = [b" ab 12", b" cd 34"]
        data = build_table([("code", "C", 3, 0), ("num", "N", 4, 0)], records, record_length=6)

        decoded = RecordAssembler(header_of(data)).feed(data)

        assert [r["code"] for r in decoded] == ["ab", "cd"]
        assert [r["num"] for r in decoded] == [12.0, 34.0]

    def test_numeric_blank(self) -> None:
        """Test blank numeric values stay NaN through the stream."""
        data = build_table([("num", "N", 4, 0)], [b"     "])

        (record,) = RecordAssembler(header_of(data)).feed(data)

        assert math.isnan(record["num"])


class TestAssemblerErrors:
    """Test assembler input validation."""

    def test_non_bytes_chunk(self, name_table: bytes) -> None:
        """Test text chunks are rejected."""
        assembler = RecordAssembler(header_of(name_table))

        with pytest.raises(DecodeError, match="bytes-like"):
            assembler.feed("not bytes")  # type: ignore[arg-type]

    def test_close_is_idempotent(self, name_table: bytes) -> None:
        """Test closing twice."""
        assembler = RecordAssembler(header_of(name_table))
        assembler.feed(name_table[:50])
        assembler.close()
        assembler.close()

        assert assembler.state is AssemblerState.EXHAUSTED
        assert assembler.feed(name_table) == []


class TestIterRecords:
    """Test the lazy iterator over chunks."""

    def test_yields_in_order(self, name_table: bytes) -> None:
        """Test records are yielded in order."""
        chunks = [name_table[i : i + 7] for i in range(0, len(name_table), 7)]
        records = list(iter_records(chunks, header_of(name_table)))

        assert [r.sequence_number for r in records] == [1, 2]

    def test_stops_pulling_when_exhausted(self, name_table: bytes) -> None:
        """Test no chunk is requested after the budget is reached."""
        pulled = []

        def chunks():
            for i in range(0, len(name_table), 4):
                pulled.append(i)
                yield name_table[i : i + 4]
            raise AssertionError("source read past the record budget")

        records = list(iter_records(chunks(), header_of(name_table)))

        assert len(records) == 2
        assert pulled[-1] < len(name_table) - 1
