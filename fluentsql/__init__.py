"""fluentSQL: a fluent builder for parameterized SQL statements.

Build statements, don't concatenate them.

Public API
----------
``select``
    Start a ``SELECT`` statement from a column list.

``replace_into``
    Start a ``REPLACE INTO`` statement for a table.

Both return a chainable facade whose ``build()`` yields a
:class:`CompiledStatement`: SQL text with positional ``?`` markers plus the
parameters in marker order, ready for a DB-API cursor::

    import fluentsql

    stmt = (
        fluentsql.select("id", "name")
        .from_("users")
        .where(lambda w: w.gt("age", 18).eq("name", "Bob"))
        .build()
    )
    cursor.execute(stmt.sql, stmt.params)

Clause configuration goes through callbacks that receive the clause builder.
Nothing is executed here; binding and execution belong to the driver.
"""

from __future__ import annotations

from typing import Any

from fluentsql.errors import (
    ClauseError,
    FluentSQLError,
    PlaceholderMismatchError,
    SettingsError,
)
from fluentsql.schema.operators import ComparisonOp
from fluentsql.schema.predicates import (
    Comparison,
    Membership,
    NullCheck,
    Predicate,
    Range,
    RawPredicate,
)
from fluentsql.schema.settings import DEFAULT_SETTINGS, StatementSettings, resolve_settings
from fluentsql.statement.base import CompiledStatement, StatementBuilder
from fluentsql.statement.clause_builders import (
    AssignmentBuilder,
    ColumnListBuilder,
    GroupByBuilder,
    HavingBuilder,
    OrderByBuilder,
    ValuesBuilder,
    WhereBuilder,
)
from fluentsql.statement.facade import Configure
from fluentsql.statement.replace import ReplaceStatement
from fluentsql.statement.select import SelectStatement

__all__ = [
    # Entry points
    "select",
    "replace_into",
    # Facades
    "SelectStatement",
    "ReplaceStatement",
    # Statement core
    "StatementBuilder",
    "CompiledStatement",
    # Clause builders
    "ColumnListBuilder",
    "WhereBuilder",
    "HavingBuilder",
    "GroupByBuilder",
    "OrderByBuilder",
    "ValuesBuilder",
    "AssignmentBuilder",
    # Predicates
    "ComparisonOp",
    "Predicate",
    "Comparison",
    "RawPredicate",
    "NullCheck",
    "Membership",
    "Range",
    # Settings
    "StatementSettings",
    "DEFAULT_SETTINGS",
    # Errors
    "FluentSQLError",
    "ClauseError",
    "PlaceholderMismatchError",
    "SettingsError",
]


def select(
    *columns: str,
    configure: Configure[ColumnListBuilder] | None = None,
    settings: StatementSettings | dict[str, Any] | None = None,
) -> SelectStatement:
    """Start a ``SELECT`` statement.

    Args:
        *columns: Column expressions, emitted comma-joined after ``SELECT``.
        configure: Optional callback receiving the column-list builder for
            further columns.
        settings: Optional :class:`StatementSettings` or its dict form.

    Returns:
        A fresh :class:`SelectStatement`; call ``from_`` next.

    Raises:
        SettingsError: If ``settings`` is an invalid mapping.
    """
    stmt = SelectStatement(resolve_settings(settings))
    if columns:
        stmt.columns(lambda c: c.columns(*columns))
    if configure is not None:
        stmt.columns(configure)
    return stmt


def replace_into(
    table: str,
    configure: Configure[ValuesBuilder] | None = None,
    settings: StatementSettings | dict[str, Any] | None = None,
) -> ReplaceStatement:
    """Start a ``REPLACE INTO <table>`` statement.

    Args:
        table: Target table.
        configure: Optional callback staging the first ``VALUES`` row.
        settings: Optional :class:`StatementSettings` or its dict form.

    Returns:
        A fresh :class:`ReplaceStatement`.

    Raises:
        SettingsError: If ``settings`` is an invalid mapping.
        ClauseError: If ``configure`` stages an invalid row.
    """
    stmt = ReplaceStatement(table, resolve_settings(settings))
    if configure is not None:
        stmt.values(configure)
    return stmt
