"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from dbf_tables import NAME_FIELDS, NAME_RECORDS, PEOPLE_FIELDS, PEOPLE_RECORDS, build_table


@pytest.fixture(scope="session")
def table_builder() -> Callable[..., bytes]:
    """Factory building table bytes from field specs and encoded records."""
    return build_table


@pytest.fixture(scope="session")
def name_table() -> bytes:
    """Two-record table with a single 9-byte character field."""
    return build_table(NAME_FIELDS, NAME_RECORDS)


@pytest.fixture(scope="session")
def people_table() -> bytes:
    """Three-record table covering character, numeric, float, logical and date fields."""
    return build_table(PEOPLE_FIELDS, PEOPLE_RECORDS, terminator="byte")


@pytest.fixture
def people_file(tmp_path: Path, people_table: bytes) -> Path:
    """The people table written to disk."""
    path = tmp_path / "people.dbf"
    path.write_bytes(people_table)
    return path
