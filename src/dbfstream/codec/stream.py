"""Incremental byte-to-record decoding.

RecordAssembler turns byte chunks of arbitrary size into records. It skips the
header region of the stream once, reassembles records split across chunks and
stops once the declared record data (``number_of_records * record_length``)
has been consumed, ignoring anything after it such as the end-of-file marker.

Example:
    >>> with open("people.dbf", "rb") as f:
    ...     header = read_header(f)
    ...     f.seek(0)
    ...     for record in iter_records(iter(lambda: f.read(4096), b""), header):
    ...         print(record.sequence_number, record.values)
"""

from __future__ import annotations

import enum
import logging
from typing import Iterable, Iterator, List, Optional

from ..exceptions import DecodeError
from ..models.header import Header
from ..models.options import ParserOptions
from ..models.record import Record
from .record import decode_record

logger = logging.getLogger(__name__)


class AssemblerState(enum.Enum):
    """Lifecycle of a RecordAssembler."""

    SKIPPING_HEADER = "skipping_header"
    DECODING = "decoding"
    EXHAUSTED = "exhausted"


class RecordAssembler:
    """Stateful decoder fed with consecutive chunks of one byte stream.

    The stream is expected to start at offset 0 of the file, header included.
    A record is only decoded once all of its bytes have arrived; incomplete
    trailing bytes are carried over to the next feed() call.

    Attributes:
        header: Header establishing the record geometry
        options: Field decoding options

    Example:
        >>> assembler = RecordAssembler(header)
        >>> records = assembler.feed(first_chunk)
        >>> records += assembler.feed(second_chunk)
        >>> assembler.close()
    """

    def __init__(self, header: Header, options: Optional[ParserOptions] = None) -> None:
        self.header = header
        self.options = options if options is not None else ParserOptions()

        self._buffer = bytearray()
        self._skip_remaining = header.header_length
        self._bytes_decoded = 0
        self._budget = header.record_budget
        self._next_sequence_number = 1
        self._state = (
            AssemblerState.SKIPPING_HEADER if self._skip_remaining > 0 else AssemblerState.DECODING
        )

    @property
    def state(self) -> AssemblerState:
        return self._state

    @property
    def exhausted(self) -> bool:
        """Whether the assembler accepts no more bytes."""
        return self._state is AssemblerState.EXHAUSTED

    @property
    def bytes_decoded(self) -> int:
        """Record bytes consumed so far (never more than the record budget)."""
        return self._bytes_decoded

    @property
    def records_emitted(self) -> int:
        return self._next_sequence_number - 1

    def feed(self, chunk: bytes) -> List[Record]:
        """Consume the next chunk and return the records it completes.

        Args:
            chunk: Next bytes of the stream, of any length

        Returns:
            Records completed by this chunk, in stream order (possibly empty)

        Raises:
            DecodeError: If chunk is not bytes-like
        """
        if not isinstance(chunk, (bytes, bytearray, memoryview)):
            raise DecodeError(f"chunk must be bytes-like, got {type(chunk).__name__}")

        if self._state is AssemblerState.EXHAUSTED:
            return []

        self._buffer.extend(chunk)
        position = 0

        if self._skip_remaining > 0:
            if len(self._buffer) <= self._skip_remaining:
                self._skip_remaining -= len(self._buffer)
                self._buffer.clear()
                if self._skip_remaining == 0:
                    self._state = AssemblerState.DECODING
                return []
            position = self._skip_remaining
            self._skip_remaining = 0
            self._state = AssemblerState.DECODING
            logger.debug(f"Skipped {self.header.header_length} header bytes")

        record_length = self.header.record_length
        records: List[Record] = []
        while (
            self._bytes_decoded < self._budget
            and len(self._buffer) - position >= record_length
        ):
            record = decode_record(
                self._next_sequence_number,
                bytes(self._buffer[position : position + record_length]),
                self.header.fields,
                self.options,
            )
            records.append(record)
            self._next_sequence_number += 1
            self._bytes_decoded += record_length
            position += record_length

        del self._buffer[:position]

        if self._bytes_decoded >= self._budget:
            self._state = AssemblerState.EXHAUSTED
            self._buffer.clear()
            logger.debug(f"Record budget reached after {self.records_emitted} records")

        return records

    def close(self) -> None:
        """Signal end of the source.

        Bytes of an incomplete trailing record are discarded without error.
        """
        if self._state is not AssemblerState.EXHAUSTED and self._buffer:
            logger.debug(
                f"Source ended after {self.records_emitted} of "
                f"{self.header.number_of_records} records; "
                f"dropping {len(self._buffer)} bytes of an incomplete record"
            )
        self._buffer.clear()
        self._state = AssemblerState.EXHAUSTED


def iter_records(
    chunks: Iterable[bytes], header: Header, options: Optional[ParserOptions] = None
) -> Iterator[Record]:
    """Lazily decode records from an iterable of byte chunks.

    Chunks must cover the stream from offset 0, header included. No further
    chunks are pulled once the record budget is exhausted.

    Args:
        chunks: Consecutive chunks of the byte stream
        header: Header of the same stream
        options: Field decoding options

    Yields:
        Records in stream order
    """
    assembler = RecordAssembler(header, options)
    try:
        for chunk in chunks:
            yield from assembler.feed(chunk)
            if assembler.exhausted:
                break
    finally:
        assembler.close()
