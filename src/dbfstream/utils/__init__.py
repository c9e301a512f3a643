"""Utility functions for dbfstream.

This module provides record layout calculations derived from a header.
"""

from __future__ import annotations

from .layout import declared_record_length, expected_file_size, field_offsets, layout_slack

__all__ = [
    "field_offsets",
    "declared_record_length",
    "layout_slack",
    "expected_file_size",
]
