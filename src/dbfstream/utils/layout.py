"""Record layout calculation utilities.

This module provides functions describing where each field lives inside a
record, computed from the header alone without reading any record.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..models.header import Header

# Offset of the first field: byte 0 of a record is the deletion marker
FIRST_FIELD_OFFSET = 1


def field_offsets(header: Header) -> Dict[str, Tuple[int, int]]:
    """Get the ``[start, end)`` byte range of each field within a record.

    Offsets are cumulative field lengths in declared order; descriptor
    displacements are ignored. Ranges are clipped to the record length.

    Args:
        header: Decoded header

    Returns:
        Dictionary mapping field names to (start, end) offsets

    Example:
        >>> field_offsets(header)
        {'NAME': (1, 10), 'AGE': (10, 13)}
    """
    offsets: Dict[str, Tuple[int, int]] = {}
    position = FIRST_FIELD_OFFSET
    for field in header.fields:
        start = min(position, header.record_length)
        end = min(position + field.length, header.record_length)
        offsets.setdefault(field.name, (start, end))
        position += field.length
    return offsets


def declared_record_length(header: Header) -> int:
    """Record length implied by the field descriptors (marker byte included)."""
    return FIRST_FIELD_OFFSET + sum(field.length for field in header.fields)


def layout_slack(header: Header) -> int:
    """Difference between the header's record length and the field layout.

    Positive values mean unused bytes at the end of each record; negative
    values mean trailing fields are cut short.
    """
    return header.record_length - declared_record_length(header)


def expected_file_size(header: Header) -> int:
    """Size in bytes of header plus record data, excluding any end marker."""
    return header.header_length + header.record_budget
