"""Record decoding.

A record is ``record_length`` bytes: a deletion marker byte (space for active
records) followed by the field values in declared order.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..models.header import FieldDescriptor
from ..models.options import ParserOptions
from ..models.record import Record
from .fields import SPACE, decode_field

_DEFAULT_OPTIONS = ParserOptions()


def decode_record(
    sequence_number: int,
    data: bytes,
    fields: Sequence[FieldDescriptor],
    options: Optional[ParserOptions] = None,
) -> Record:
    """Decode one complete record.

    Field offsets are the running sum of field lengths starting after the
    deletion marker; descriptor displacements are not used. Fields extending
    past the end of ``data`` are cut short rather than read beyond it.

    Args:
        sequence_number: 1-based position of the record in the stream
        data: The record's bytes
        fields: Field descriptors in declared order
        options: Decoding options (defaults apply when omitted)

    Returns:
        Decoded Record
    """
    if options is None:
        options = _DEFAULT_OPTIONS

    values: Dict[str, Any] = {}
    position = 1
    for field in fields:
        values[field.name] = decode_field(
            field,
            data[position : position + field.length],
            raw=options.is_raw(field.name),
            parse_types=options.parse_types,
            encoding=options.encoding,
        )
        position += field.length

    return Record(
        sequence_number=sequence_number,
        deleted=not data or data[0] != SPACE,
        values=values,
    )
