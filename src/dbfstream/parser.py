"""File-level parser.

Parser ties the header reader and the streaming assembler to a concrete byte
source: a filesystem path or an already open, seekable binary file.
"""

from __future__ import annotations

import logging
import os
from typing import Any, BinaryIO, Iterator, List, Optional, Union

from .codec.header import read_header
from .codec.stream import iter_records
from .models.header import Header
from .models.options import ParserOptions
from .models.record import Record

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", BinaryIO]


def iter_chunks(source: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    """Yield successive reads of ``chunk_size`` bytes until end of data."""
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            return
        yield chunk


class Parser:
    """Decode records from a dBase-style table.

    The header is read when the parser is constructed; records are decoded
    lazily, chunk by chunk, each time records() is called.

    Args:
        source: Path of the table, or an open seekable binary file
        options: Decoding options
        **overrides: Individual ParserOptions fields overriding ``options``

    Raises:
        MalformedHeaderError: If the header is short or inconsistent
        OSError: If the source cannot be opened or read

    Example:
        >>> parser = Parser("people.dbf", parse_types=False)
        >>> [f.name for f in parser.header.fields]
        ['NAME', 'AGE']
        >>> for record in parser:
        ...     print(record["NAME"])
    """

    def __init__(
        self, source: Source, options: Optional[ParserOptions] = None, **overrides: Any
    ) -> None:
        if options is None:
            options = ParserOptions()
        self.options = options.merged(**overrides)

        self._path: Optional[str] = None
        self._file: Optional[BinaryIO] = None
        if isinstance(source, (str, os.PathLike)):
            self._path = os.fspath(source)
        else:
            self._file = source

        self.header: Header = self._read_header()

    @property
    def name(self) -> str:
        if self._path is not None:
            return self._path
        return str(getattr(self._file, "name", "<stream>"))

    def _read_header(self) -> Header:
        if self._path is not None:
            with open(self._path, "rb") as f:
                return read_header(f, self.options.encoding)
        assert self._file is not None
        return read_header(self._file, self.options.encoding)

    def records(self) -> Iterator[Record]:
        """Return a new iterator over the records, reading from offset 0.

        Each call decodes the source again from the start; a single iterator
        cannot be restarted.
        """
        if self._path is not None:
            with open(self._path, "rb") as f:
                yield from self._decode(f)
        else:
            assert self._file is not None
            self._file.seek(0)
            yield from self._decode(self._file)

    def _decode(self, source: BinaryIO) -> Iterator[Record]:
        logger.debug(f"Decoding records from {self.name}")
        chunks = iter_chunks(source, self.options.chunk_size)
        yield from iter_records(chunks, self.header, self.options)

    def __iter__(self) -> Iterator[Record]:
        return self.records()


def parse_file(source: Source, **options: Any) -> List[Record]:
    """Decode every record of a table into a list.

    Args:
        source: Path of the table, or an open seekable binary file
        **options: ParserOptions fields

    Returns:
        All records in file order
    """
    return list(Parser(source, **options).records())
