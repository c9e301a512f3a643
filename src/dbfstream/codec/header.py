"""Header decoding.

This module reads the fixed 32-byte base header and the array of 32-byte field
descriptors that follows it. The header is read with two blocking reads, both
from offset 0, and must be complete before any record is decoded.

Base header layout (little-endian):
    0       version (uint8)
    1-3     last update date (3 x uint8)
    4-7     number of records (int32)
    8-9     header length (int16)
    10-11   record length (int16)
    12-31   reserved

Field descriptor layout (little-endian):
    0-10    name (NUL padded)
    11      type tag
    12-15   displacement (int32)
    16      length (uint8)
    17      decimal places (uint8)
    18-30   reserved
    31      index flag (uint8)
"""

from __future__ import annotations

import datetime
import logging
import struct
from typing import BinaryIO, List

from ..exceptions import MalformedHeaderError
from ..models.header import FieldDescriptor, Header

logger = logging.getLogger(__name__)

BASE_HEADER_SIZE = 32
DESCRIPTOR_SIZE = 32

_BASE_HEADER = struct.Struct("<B3sihh")
_DESCRIPTOR = struct.Struct("<11sciBB13xB")


def decode_header_date(data: bytes) -> datetime.date:
    """Reconstruct the last-update date from its three raw bytes.

    The bytes are fed to a (year, month, day) constructor as
    ``year=data[2]``, ``month=data[1]`` and ``day=data[0] + 1900``, with the
    same normalisation rules as a JavaScript ``Date``: years 0-99 map to
    1900-1999, out-of-range months roll into adjacent years and out-of-range
    days roll forward from the first of the month.

    Args:
        data: At least three bytes

    Returns:
        The reconstructed date
    """
    day = data[0] + 1900
    month_index = data[1] - 1
    year = data[2]

    if 0 <= year <= 99:
        year += 1900
    year += month_index // 12
    month_index %= 12

    return datetime.date(year, month_index + 1, 1) + datetime.timedelta(days=day - 1)


def decode_field_descriptor(data: bytes, encoding: str = "utf-8") -> FieldDescriptor:
    """Decode one 32-byte field descriptor.

    Malformed content yields odd values rather than an error; header-level
    length checks are done by read_header().

    Args:
        data: Exactly 32 bytes
        encoding: Encoding used for the field name

    Returns:
        Decoded FieldDescriptor
    """
    name, type_tag, displacement, length, decimal_places, index_flag = _DESCRIPTOR.unpack(data)
    return FieldDescriptor(
        name=name.decode(encoding, errors="replace").rstrip("\x00"),
        type=type_tag.decode("latin-1"),
        displacement=displacement,
        length=length,
        decimal_places=decimal_places,
        index_flag=index_flag,
    )


def decode_base_header(data: bytes) -> Header:
    """Decode the 32-byte base header into a Header with no fields.

    Raises:
        MalformedHeaderError: If fewer than 32 bytes are given or the declared
            geometry is inconsistent
    """
    if len(data) < BASE_HEADER_SIZE:
        raise MalformedHeaderError(
            f"Base header too short: need {BASE_HEADER_SIZE} bytes, got {len(data)}"
        )

    version, raw_date, number_of_records, header_length, record_length = _BASE_HEADER.unpack_from(
        data
    )

    if header_length < BASE_HEADER_SIZE:
        raise MalformedHeaderError(
            f"Header length {header_length} is smaller than the {BASE_HEADER_SIZE}-byte base header"
        )
    if record_length <= 0:
        raise MalformedHeaderError(f"Record length must be positive, got {record_length}")
    if number_of_records < 0:
        raise MalformedHeaderError(f"Record count must not be negative, got {number_of_records}")

    return Header(
        version=version,
        date_updated=decode_header_date(raw_date),
        number_of_records=number_of_records,
        header_length=header_length,
        record_length=record_length,
    )


def decode_field_descriptors(
    data: bytes, header_length: int, encoding: str = "utf-8"
) -> List[FieldDescriptor]:
    """Decode the descriptor array of a full header.

    Windows start at offset 32 and stop before the trailing terminator block,
    so a ``64 + 32n`` byte header yields ``n`` descriptors.
    """
    descriptors = []
    for offset in range(BASE_HEADER_SIZE, header_length - DESCRIPTOR_SIZE, DESCRIPTOR_SIZE):
        window = data[offset : offset + DESCRIPTOR_SIZE]
        if len(window) < DESCRIPTOR_SIZE:
            break
        descriptors.append(decode_field_descriptor(window, encoding))
    return descriptors


def read_header(source: BinaryIO, encoding: str = "utf-8") -> Header:
    """Read and decode the complete header of a seekable byte source.

    The base header is read first to learn the header length, then the whole
    header is read again from offset 0.

    Args:
        source: Seekable binary file object
        encoding: Encoding used for field names

    Returns:
        Header with its field descriptors attached

    Raises:
        MalformedHeaderError: If the header is short or inconsistent
        OSError: If the source cannot be read
    """
    source.seek(0)
    base = decode_base_header(_read_exactly(source, BASE_HEADER_SIZE))

    source.seek(0)
    data = _read_exactly(source, base.header_length)
    if len(data) < base.header_length:
        raise MalformedHeaderError(
            f"Truncated header: declared {base.header_length} bytes, got {len(data)}"
        )

    fields = decode_field_descriptors(data, base.header_length, encoding)
    logger.debug(
        f"Header: {base.number_of_records} records of {base.record_length} bytes, "
        f"{len(fields)} fields, header {base.header_length} bytes"
    )

    return Header(
        version=base.version,
        date_updated=base.date_updated,
        number_of_records=base.number_of_records,
        header_length=base.header_length,
        record_length=base.record_length,
        fields=tuple(fields),
    )


def _read_exactly(source: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` bytes, retrying short reads until end of data."""
    result = bytearray()
    while len(result) < size:
        chunk = source.read(size - len(result))
        if not chunk:
            break
        result.extend(chunk)
    return bytes(result)
