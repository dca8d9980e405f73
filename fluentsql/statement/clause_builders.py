"""Clause-level SQL builders.

Each class handles exactly one SQL clause and writes into the
:class:`~fluentsql.statement.base.StatementBuilder` owned by its facade.
All incremental builders share one emission rule (:class:`ClauseBuilder`):

* the first fragment is preceded by the clause keyword,
* every later fragment is preceded by the clause separator,
* a fragment's parameters are added in the same call that appends its text,
* a builder that never receives a fragment emits nothing.

Classes
-------
ColumnListBuilder   - ``SELECT <col>,<col>``
GroupByBuilder      - `` GROUP BY <col>,<col>``
OrderByBuilder      - `` ORDER BY <col> [DESC],<col>``
WhereBuilder        - `` WHERE <pred> AND <pred>``
HavingBuilder       - `` HAVING <pred> AND <pred>``
AssignmentBuilder   - `` SET <col> = ?,<col> = ?``
ValuesBuilder       - ``(<cols>) VALUES(?,?)[,(?,?)]``
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from fluentsql.errors import ClauseError
from fluentsql.schema.operators import ComparisonOp
from fluentsql.schema.predicates import (
    Comparison,
    Membership,
    NullCheck,
    Predicate,
    Range,
    RawPredicate,
    to_predicate,
)
from fluentsql.statement.base import StatementBuilder


class ClauseBuilder:
    """Keyword-on-first, separator-between emission shared by all clauses."""

    clause: ClassVar[str] = ""
    keyword: ClassVar[str] = ""
    separator: ClassVar[str] = ","

    def __init__(self, statement: StatementBuilder) -> None:
        self._stmt = statement
        self._count = 0

    @property
    def started(self) -> bool:
        return self._count > 0

    @property
    def count(self) -> int:
        """Number of fragments emitted so far."""
        return self._count

    def _emit(self, text: str, params: Iterable[Any] = ()) -> ClauseBuilder:
        self._stmt.append(self.separator if self.started else self.keyword)
        self._stmt.append(text).add_params(*params)
        self._count += 1
        return self


# ---------------------------------------------------------------------------
# Column lists
# ---------------------------------------------------------------------------


class ColumnListBuilder(ClauseBuilder):
    """Builds the ``SELECT a,b,c`` column list.  Columns bind no parameters."""

    clause = "SELECT"
    keyword = "SELECT "

    def column(self, name: str) -> ColumnListBuilder:
        self._emit(name)
        return self

    def columns(self, *names: str) -> ColumnListBuilder:
        for name in names:
            self._emit(name)
        return self


class GroupByBuilder(ColumnListBuilder):
    clause = "GROUP BY"
    keyword = " GROUP BY "


class OrderByBuilder(ClauseBuilder):
    """Builds `` ORDER BY a,b DESC``."""

    clause = "ORDER BY"
    keyword = " ORDER BY "

    def column(self, name: str, descending: bool = False) -> OrderByBuilder:
        self._emit(f"{name} DESC" if descending else name)
        return self

    def asc(self, *names: str) -> OrderByBuilder:
        for name in names:
            self._emit(f"{name} ASC")
        return self

    def desc(self, *names: str) -> OrderByBuilder:
        for name in names:
            self._emit(f"{name} DESC")
        return self


# ---------------------------------------------------------------------------
# Predicates (WHERE / HAVING)
# ---------------------------------------------------------------------------


class ConditionBuilder(ClauseBuilder):
    """Conjunction of predicates; each renders ``(text, params)`` in one step.

    Structured forms cover ``<column> <op> ?``, ``IS [NOT] NULL``, ``IN`` and
    ``BETWEEN``; :meth:`raw` passes through anything else with its own
    parameter list.
    """

    separator = " AND "

    def add(self, predicate: Predicate | dict[str, Any]) -> ConditionBuilder:
        """Append a typed predicate model or its dict form.

        Raises:
            ClauseError: If a dict does not describe a valid predicate.
        """
        try:
            parsed = to_predicate(predicate)
        except ClauseError as exc:
            raise ClauseError(str(exc), clause=self.clause) from exc
        text, params = parsed.render(self._stmt.placeholder)
        self._emit(text, params)
        return self

    def condition(
        self, column: str, op: ComparisonOp | str, value: Any
    ) -> ConditionBuilder:
        """Append ``<column> <op> ?`` binding ``value``.

        Raises:
            ClauseError: If ``op`` is not a known comparison operator.
        """
        try:
            return self.add(Comparison(column=column, op=op, value=value))
        except ValueError as exc:
            raise ClauseError(str(exc), clause=self.clause) from exc

    def eq(self, column: str, value: Any) -> ConditionBuilder:
        return self.condition(column, ComparisonOp.EQ, value)

    def ne(self, column: str, value: Any) -> ConditionBuilder:
        return self.condition(column, ComparisonOp.NE, value)

    def gt(self, column: str, value: Any) -> ConditionBuilder:
        return self.condition(column, ComparisonOp.GT, value)

    def gte(self, column: str, value: Any) -> ConditionBuilder:
        return self.condition(column, ComparisonOp.GTE, value)

    def lt(self, column: str, value: Any) -> ConditionBuilder:
        return self.condition(column, ComparisonOp.LT, value)

    def lte(self, column: str, value: Any) -> ConditionBuilder:
        return self.condition(column, ComparisonOp.LTE, value)

    def like(self, column: str, pattern: str) -> ConditionBuilder:
        return self.condition(column, ComparisonOp.LIKE, pattern)

    def is_null(self, column: str) -> ConditionBuilder:
        return self.add(NullCheck(column=column))

    def is_not_null(self, column: str) -> ConditionBuilder:
        return self.add(NullCheck(column=column, is_null=False))

    def in_(self, column: str, values: Iterable[Any]) -> ConditionBuilder:
        """Append ``<column> IN (?,?,...)``, one parameter per value.

        Raises:
            ClauseError: If ``values`` is empty.
        """
        values = list(values)
        if not values:
            raise ClauseError(
                f"IN on '{column}' needs at least one value.", clause=self.clause
            )
        return self.add(Membership(column=column, values=values))

    def between(self, column: str, low: Any, high: Any) -> ConditionBuilder:
        return self.add(Range(column=column, low=low, high=high))

    def raw(self, fragment: str, *params: Any) -> ConditionBuilder:
        """Append ``fragment`` verbatim, binding ``params`` in order."""
        return self.add(RawPredicate(sql=fragment, params=list(params)))


class WhereBuilder(ConditionBuilder):
    clause = "WHERE"
    keyword = " WHERE "


class HavingBuilder(ConditionBuilder):
    clause = "HAVING"
    keyword = " HAVING "


# ---------------------------------------------------------------------------
# REPLACE INTO targets
# ---------------------------------------------------------------------------


class AssignmentBuilder(ClauseBuilder):
    """Builds the MySQL `` SET a = ?,b = ?`` form of ``REPLACE INTO``."""

    clause = "SET"
    keyword = " SET "

    def assign(self, column: str, value: Any) -> AssignmentBuilder:
        self._emit(f"{column} = {self._stmt.placeholder}", (value,))
        return self

    def expression(self, column: str, sql: str, *params: Any) -> AssignmentBuilder:
        """Assign a verbatim SQL expression (e.g. ``NOW()``) to ``column``."""
        self._emit(f"{column} = {sql}", params)
        return self


class ValuesBuilder:
    """Builds ``(a,b) VALUES(?,?)`` one row at a time.

    The column list and the value markers live in separate parts of the
    text, so a row is staged first and written by :meth:`flush`.  The first
    flushed row fixes the column list; later rows append ``,(?,?)`` and must
    name the same columns in the same order.  Flushing an empty row emits
    nothing.
    """

    clause = "VALUES"

    def __init__(self, statement: StatementBuilder) -> None:
        self._stmt = statement
        self._columns: tuple[str, ...] | None = None
        self._rows = 0
        self._staged: list[tuple[str, str, tuple[Any, ...]]] = []

    @property
    def columns(self) -> tuple[str, ...]:
        return self._columns or ()

    @property
    def rows(self) -> int:
        return self._rows

    def value(self, column: str, value: Any) -> ValuesBuilder:
        self._staged.append((column, self._stmt.placeholder, (value,)))
        return self

    def values(self, row: Mapping[str, Any]) -> ValuesBuilder:
        for column, value in row.items():
            self.value(column, value)
        return self

    def expression(self, column: str, sql: str, *params: Any) -> ValuesBuilder:
        """Stage a verbatim SQL expression (e.g. ``NOW()``) for ``column``."""
        self._staged.append((column, sql, params))
        return self

    def discard(self) -> ValuesBuilder:
        """Drop the staged row without writing it."""
        self._staged.clear()
        return self

    def flush(self) -> ValuesBuilder:
        """Write the staged row to the statement.

        Raises:
            ClauseError: If the row's columns differ from the first row's.
        """
        staged, self._staged = self._staged, []
        if not staged:
            return self

        columns = tuple(column for column, _, _ in staged)
        markers = ",".join(sql for _, sql, _ in staged)
        if self._columns is None:
            self._columns = columns
            self._stmt.append(f"({','.join(columns)}) VALUES({markers})")
        elif columns != self._columns:
            raise ClauseError(
                f"Row columns {list(columns)} do not match {list(self._columns)}.",
                clause=self.clause,
            )
        else:
            self._stmt.append(f",({markers})")

        for _, _, params in staged:
            self._stmt.add_params(*params)
        self._rows += 1
        return self
