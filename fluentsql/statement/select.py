"""``SELECT`` statement facade."""
from __future__ import annotations

from fluentsql.errors import ClauseError
from fluentsql.statement.clause_builders import (
    ColumnListBuilder,
    GroupByBuilder,
    HavingBuilder,
    OrderByBuilder,
    WhereBuilder,
)
from fluentsql.statement.facade import Configure, StatementFacade


class SelectStatement(StatementFacade):
    """Chainable ``SELECT`` builder::

        stmt = (
            SelectStatement()
            .columns(lambda c: c.columns("dept", "COUNT(*)"))
            .from_("employees")
            .where(lambda w: w.gt("age", 18))
            .group_by("dept")
            .having(lambda h: h.raw("COUNT(*) > ?", 5))
            .build()
        )

    Clauses are written in call order.
    """

    def columns(self, configure: Configure[ColumnListBuilder]) -> SelectStatement:
        self._configure(ColumnListBuilder, configure)
        return self

    def from_(self, table: str) -> SelectStatement:
        """Append `` FROM <table>``; writes ``SELECT *`` first if no column
        has been selected."""
        select_list = self._clause(ColumnListBuilder)
        if not select_list.started:
            select_list.column("*")
        self._stmt.append(f" FROM {table}")
        return self

    def where(self, configure: Configure[WhereBuilder]) -> SelectStatement:
        self._configure(WhereBuilder, configure)
        return self

    def group_by(self, *columns: str) -> SelectStatement:
        self._clause(GroupByBuilder).columns(*columns)
        return self

    def having(self, configure: Configure[HavingBuilder]) -> SelectStatement:
        self._configure(HavingBuilder, configure)
        return self

    def order_by(self, *columns: str, descending: bool = False) -> SelectStatement:
        order = self._clause(OrderByBuilder)
        for column in columns:
            order.column(column, descending=descending)
        return self

    def limit(self, count: int, offset: int | None = None) -> SelectStatement:
        """Append `` LIMIT ?`` (and `` OFFSET ?``) with bound values.

        Raises:
            ClauseError: If ``count`` or ``offset`` is negative.
        """
        if count < 0 or (offset is not None and offset < 0):
            raise ClauseError("LIMIT and OFFSET must be non-negative.", clause="LIMIT")
        placeholder = self._stmt.placeholder
        self._stmt.append(f" LIMIT {placeholder}").add_params(count)
        if offset is not None:
            self._stmt.append(f" OFFSET {placeholder}").add_params(offset)
        return self
