"""Exception hierarchy for dbfstream.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from DbfStreamError for easy catching of any dbfstream-specific error.

Errors raised by the byte source itself (missing file, permissions, failed reads)
are not wrapped: they propagate as the builtin OSError/IOError.
"""

from __future__ import annotations


class DbfStreamError(Exception):
    """Base exception for all dbfstream errors."""

    pass


class HeaderError(DbfStreamError):
    """Raised when the file header cannot be interpreted."""

    pass


class MalformedHeaderError(HeaderError):
    """Raised when the header declares inconsistent or unavailable geometry.

    Examples:
        - Fewer than 32 bytes available for the base header
        - Header length smaller than the 32-byte base header
        - Record length zero or negative
        - Source shorter than the declared header length
    """

    pass


class DecodeError(DbfStreamError):
    """Raised when the streaming decoder is fed something it cannot consume.

    Field-level problems (blank or garbled values) never raise: they decode to
    empty text or a NaN sentinel instead.
    """

    pass
