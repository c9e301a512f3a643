"""Field value decoding.

Field values are space padded to their declared width. Decoding never raises:
blank or garbled numeric text decodes to NaN, and undecodable bytes are
replaced with U+FFFD.
"""

from __future__ import annotations

import math
from typing import Union

from ..models.header import FieldDescriptor

SPACE = 0x20

FieldValue = Union[str, float, bytes]


def trim_spaces(data: bytes) -> bytes:
    """Strip trailing and then leading 0x20 bytes (and nothing else)."""
    end = len(data)
    while end > 0 and data[end - 1] == SPACE:
        end -= 1
    start = 0
    while start < end and data[start] == SPACE:
        start += 1
    return bytes(data[start:end])


def parse_number(text: str) -> float:
    """Parse numeric field text, returning NaN when it is not a number.

    Example:
        >>> parse_number("12.50")
        12.5
        >>> math.isnan(parse_number(""))
        True
    """
    try:
        return float(text)
    except ValueError:
        return math.nan


def decode_field(
    field: FieldDescriptor,
    data: bytes,
    *,
    raw: bool = False,
    parse_types: bool = True,
    encoding: str = "utf-8",
) -> FieldValue:
    """Decode the bytes belonging to one field of one record.

    Args:
        field: Descriptor of the field being decoded
        data: Exact slice of the record holding this field
        raw: Return the trimmed bytes without text decoding
        parse_types: Coerce numeric (N) and float (F) fields to float
        encoding: Text encoding of the field

    Returns:
        Trimmed bytes (raw), a float (coerced numeric) or text
    """
    trimmed = trim_spaces(data)

    if raw:
        return trimmed

    text = trimmed.decode(encoding, errors="replace")
    if parse_types and field.is_numeric:
        return parse_number(text)

    return text
