"""Header and field descriptor value types.

Both types are immutable once constructed. The header is decoded once, before
any record is read, and fixes the record geometry for the whole session.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Optional, Tuple

# Type tags that are coerced to numbers when type parsing is enabled
NUMERIC_TYPES = frozenset({"N", "F"})


@dataclass(frozen=True)
class FieldDescriptor:
    """Metadata for a single column.

    Attributes:
        name: Field name with trailing NUL padding removed
        type: Single-character type tag (C, N, F, L, D, M, ...)
        displacement: Offset recorded in the descriptor (informational only)
        length: Width of the field in bytes within a record
        decimal_places: Declared decimal count (informational only)
        index_flag: Index/production flag, passed through uninterpreted
    """

    name: str
    type: str
    displacement: int
    length: int
    decimal_places: int
    index_flag: int

    @property
    def is_numeric(self) -> bool:
        """Whether values of this field are coerced to numbers."""
        return self.type in NUMERIC_TYPES


@dataclass(frozen=True)
class Header:
    """Decoded file header.

    Attributes:
        version: Format/version tag byte
        date_updated: Last update date, reconstructed from three raw bytes
        number_of_records: Declared count of data records
        header_length: Total header size in bytes, descriptors and terminator included
        record_length: Size of one record, deletion marker included
        fields: Field descriptors in on-disk (and record layout) order
    """

    version: int
    date_updated: datetime.date
    number_of_records: int
    header_length: int
    record_length: int
    fields: Tuple[FieldDescriptor, ...] = field(default_factory=tuple)

    @property
    def record_budget(self) -> int:
        """Maximum number of record bytes a decode session will consume."""
        return self.number_of_records * self.record_length

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def get_field(self, name: str) -> Optional[FieldDescriptor]:
        """Return the first descriptor called ``name``, or None."""
        for descriptor in self.fields:
            if descriptor.name == name:
                return descriptor
        return None
