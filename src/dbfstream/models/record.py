"""Decoded record value type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator

SEQUENCE_NUMBER_KEY = "@sequenceNumber"
DELETED_KEY = "@deleted"


@dataclass
class Record:
    """One decoded row.

    Records are produced once by the streaming decoder and never retained by it.

    Attributes:
        sequence_number: 1-based position among decoded records
        deleted: True unless the deletion marker byte is a space
        values: Decoded field values keyed by field name, in declared order
    """

    sequence_number: int
    deleted: bool
    values: Dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Any:
        return self.values[name]

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def to_dict(self) -> Dict[str, Any]:
        """Return the flat mapping form, with ``@``-prefixed metadata keys first.

        Example:
            >>> Record(1, False, {"NAME": "name1"}).to_dict()
            {'@sequenceNumber': 1, '@deleted': False, 'NAME': 'name1'}
        """
        result: Dict[str, Any] = {
            SEQUENCE_NUMBER_KEY: self.sequence_number,
            DELETED_KEY: self.deleted,
        }
        result.update(self.values)
        return result
