"""Shared pytest fixtures for fluentSQL unit and integration tests."""
from __future__ import annotations

import sqlite3

import pytest

from fluentsql.schema.settings import StatementSettings
from fluentsql.statement.base import StatementBuilder
from tests.fixtures import USERS, load_ddl


@pytest.fixture()
def builder() -> StatementBuilder:
    """A fresh statement core with default settings."""
    return StatementBuilder()


@pytest.fixture(scope="session")
def format_settings() -> StatementSettings:
    """``%s`` placeholders, as used by format-style drivers."""
    return StatementSettings(placeholder="%s")


@pytest.fixture()
def db() -> sqlite3.Connection:
    """In-memory SQLite database seeded with :data:`tests.fixtures.USERS`."""
    conn = sqlite3.connect(":memory:")
    conn.executescript(load_ddl())
    conn.executemany("INSERT INTO users (id, name, age, dept) VALUES (?, ?, ?, ?)", USERS)
    yield conn
    conn.close()
