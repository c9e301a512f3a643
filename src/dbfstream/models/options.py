"""Decoder configuration.

ParserOptions is a Pydantic model so that every option is validated in one
place, whether it comes from keyword arguments, a dict or the CLI.
"""

from __future__ import annotations

import codecs
from typing import Any, FrozenSet

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CHUNK_SIZE = 64 * 1024


class ParserOptions(BaseModel):
    """Options controlling how record bytes are turned into values.

    Attributes:
        parse_types: Coerce numeric (N) and float (F) field text to numbers
        raw_fields: Names of fields returned as trimmed raw bytes instead of text
        encoding: Text encoding used for field values and field names
        chunk_size: Number of bytes requested per read when streaming a file

    Example:
        >>> options = ParserOptions(parse_types=False, raw_fields={"PHOTO"})
        >>> options.is_raw("PHOTO")
        True
    """

    model_config = ConfigDict(
        frozen=True,
        # Forbid options that do not exist
        extra="forbid",
    )

    parse_types: bool = True
    raw_fields: FrozenSet[str] = frozenset()
    encoding: str = "utf-8"
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value

    def is_raw(self, name: str) -> bool:
        """Whether the field called ``name`` bypasses text decoding."""
        return name in self.raw_fields

    def merged(self, **overrides: Any) -> ParserOptions:
        """Return a validated copy with ``overrides`` applied."""
        if not overrides:
            return self
        return ParserOptions(**{**self.model_dump(), **overrides})
