"""Unit tests for the REPLACE INTO facade."""

from __future__ import annotations

import pytest

import fluentsql
from fluentsql.errors import ClauseError


def test_replace_into_with_values():
    stmt = fluentsql.replace_into(
        "users", lambda v: v.value("id", 1).value("name", "Bob")
    ).build()
    assert stmt.sql == "REPLACE INTO users(id,name) VALUES(?,?)"
    assert stmt.params == (1, "Bob")


def test_replace_into_without_configuration():
    stmt = fluentsql.replace_into("users").build()
    assert stmt.sql == "REPLACE INTO users"
    assert stmt.params == ()


def test_empty_values_callback_emits_nothing():
    stmt = fluentsql.replace_into("users").values(lambda v: None).build()
    assert stmt.sql == "REPLACE INTO users"


def test_multiple_rows():
    stmt = (
        fluentsql.replace_into("users")
        .values(lambda v: v.values({"id": 1, "name": "Bob"}))
        .values(lambda v: v.values({"id": 2, "name": "Eve"}))
        .build()
    )
    assert stmt.sql == "REPLACE INTO users(id,name) VALUES(?,?),(?,?)"
    assert stmt.params == (1, "Bob", 2, "Eve")


def test_mismatched_row_rejected():
    stmt = fluentsql.replace_into("users", lambda v: v.value("id", 1))
    with pytest.raises(ClauseError):
        stmt.values(lambda v: v.value("name", "Eve"))
    assert stmt.build().params == (1,)


def test_set_form():
    stmt = (
        fluentsql.replace_into("users")
        .set(lambda s: s.assign("id", 1).assign("name", "Bob"))
        .set(lambda s: s.expression("updated_at", "NOW()"))
        .build()
    )
    assert stmt.sql == "REPLACE INTO users SET id = ?,name = ?,updated_at = NOW()"
    assert stmt.params == (1, "Bob")


def test_table_attribute_and_idempotent_build():
    stmt = fluentsql.replace_into("users", lambda v: v.value("id", 1))
    assert stmt.table == "users"
    assert stmt.build() == stmt.build()


def test_format_placeholder(format_settings):
    stmt = fluentsql.replace_into(
        "users", lambda v: v.value("id", 1), settings=format_settings
    ).build()
    assert stmt.sql == "REPLACE INTO users(id) VALUES(%s)"
    assert stmt.verify().params == (1,)


def test_failed_values_callback_leaves_no_staged_columns():
    def stage_then_fail(v):
        v.value("id", 1)
        raise RuntimeError("lookup failed")

    stmt = fluentsql.replace_into("users")
    with pytest.raises(RuntimeError):
        stmt.values(stage_then_fail)
    stmt.values(lambda v: v.value("id", 2).value("name", "Eve"))

    compiled = stmt.build()
    assert compiled.sql == "REPLACE INTO users(id,name) VALUES(?,?)"
    assert compiled.params == (2, "Eve")
