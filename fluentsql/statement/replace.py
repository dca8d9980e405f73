"""``REPLACE INTO`` statement facade."""
from __future__ import annotations

from fluentsql.schema.settings import StatementSettings
from fluentsql.statement.clause_builders import AssignmentBuilder, ValuesBuilder
from fluentsql.statement.facade import Configure, StatementFacade


class ReplaceStatement(StatementFacade):
    """Chainable ``REPLACE INTO`` builder.

    Two target forms are supported; use one per statement:

    * ``values`` - ``REPLACE INTO t(a,b) VALUES(?,?)``, one row per call
      (``,(?,?)`` for every row after the first).
    * ``set`` - ``REPLACE INTO t SET a = ?,b = ?`` (MySQL).
    """

    def __init__(self, table: str, settings: StatementSettings | None = None) -> None:
        super().__init__(settings)
        self.table = table
        self._stmt.append(f"REPLACE INTO {table}")

    def values(self, configure: Configure[ValuesBuilder]) -> ReplaceStatement:
        """Stage one row through ``configure`` and write it.

        Raises:
            ClauseError: If the row names different columns than the first row.
        """
        builder = self._clause(ValuesBuilder)
        try:
            configure(builder)
        except BaseException:
            builder.discard()
            raise
        builder.flush()
        return self

    def set(self, configure: Configure[AssignmentBuilder]) -> ReplaceStatement:
        self._configure(AssignmentBuilder, configure)
        return self
