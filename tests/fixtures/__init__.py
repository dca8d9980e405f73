"""Test fixtures: sample DDL and seed rows for the SQLite integration tests."""

from __future__ import annotations

from pathlib import Path

_FIXTURES_DIR = Path(__file__).parent

#: Rows seeded into ``users`` by the ``db`` fixture in ``tests/conftest.py``: (id, name, age, dept).
USERS: list[tuple[int, str, int | None, str]] = [
    (1, "Alice", 34, "eng"),
    (2, "Bob", 19, "eng"),
    (3, "Carol", 17, "ops"),
    (4, "Dave", 52, "ops"),
    (5, "Erin", None, "sales"),
    (6, "Frank", 41, "eng"),
]


def load_ddl() -> str:
    """Return the sample SQLite DDL string."""
    return (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()
