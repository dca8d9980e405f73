"""Statement core: the text buffer, the parameter list, and the finished
:class:`CompiledStatement`.

``StatementBuilder`` exposes exactly two mutating primitives, ``append`` and
``add_params``.  Clause builders call both in the same step for every
fragment, which keeps placeholder markers and parameter values aligned left
to right.  The builder itself counts nothing; :meth:`CompiledStatement.verify`
is the opt-in check for callers who want one.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from fluentsql.errors import PlaceholderMismatchError
from fluentsql.schema.settings import DEFAULT_SETTINGS, StatementSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledStatement:
    """The output of a finished build.

    Attributes:
        sql: SQL text with positional placeholder markers.
        params: Bind values in the order their markers appear in ``sql``.
        placeholder: The marker used while building (``'?'`` by default).
    """

    sql: str
    params: tuple[Any, ...]
    placeholder: str = "?"

    def param_strings(self) -> tuple[str | None, ...]:
        """Return the parameters as text, for drivers that bind strings only.

        ``None`` is kept as ``None`` so it still binds as SQL ``NULL``.
        """
        return tuple(None if p is None else str(p) for p in self.params)

    def placeholder_count(self) -> int:
        """Count placeholder markers in ``sql``.

        Markers inside quoted literals of raw fragments are counted too.
        """
        return self.sql.count(self.placeholder)

    def verify(self) -> CompiledStatement:
        """Check that marker count and parameter count agree.

        Returns:
            ``self``, so the call can be chained onto ``build()``.

        Raises:
            PlaceholderMismatchError: If the counts differ.
        """
        markers = self.placeholder_count()
        if markers != len(self.params):
            raise PlaceholderMismatchError(
                f"Statement has {markers} placeholder(s) but "
                f"{len(self.params)} parameter(s): {self.sql}",
                markers=markers,
                params=len(self.params),
            )
        return self

    def __iter__(self) -> Iterator[Any]:
        # Allows ``sql, params = stmt.build()`` and ``cursor.execute(*stmt.build())``.
        return iter((self.sql, self.params))


class StatementBuilder:
    """Owns one statement's text buffer and ordered parameter list.

    A builder belongs to a single caller on a single thread; it does no
    locking.  Independent builders share nothing.

    Args:
        settings: Build settings; defaults to :data:`DEFAULT_SETTINGS`.
    """

    def __init__(self, settings: StatementSettings | None = None) -> None:
        self._settings = settings or DEFAULT_SETTINGS
        self._fragments: list[str] = []
        self._params: list[Any] = []

    @property
    def settings(self) -> StatementSettings:
        return self._settings

    @property
    def placeholder(self) -> str:
        return self._settings.placeholder

    @property
    def is_empty(self) -> bool:
        return not self._fragments

    # ------------------------------------------------------------------
    # Mutating primitives
    # ------------------------------------------------------------------

    def append(self, fragment: str) -> StatementBuilder:
        """Append ``fragment`` verbatim to the text buffer."""
        self._fragments.append(fragment)
        return self

    def add_params(self, *values: Any) -> StatementBuilder:
        """Append ``values`` to the parameter list, in order."""
        self._params.extend(values)
        return self

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        return "".join(self._fragments)

    def text_snapshot(self) -> str:
        return self.text

    def params_snapshot(self) -> tuple[Any, ...]:
        return tuple(self._params)

    def param_strings(self) -> tuple[str | None, ...]:
        return tuple(None if p is None else str(p) for p in self._params)

    def build(self) -> CompiledStatement:
        """Return an immutable snapshot of the current text and parameters.

        Idempotent: calling it again without further configuration returns
        an equal result.  Later appends never change a snapshot already
        handed out.

        Raises:
            PlaceholderMismatchError: Only when ``settings.verify_on_build``
                is set and the counts disagree.
        """
        compiled = CompiledStatement(
            sql=self.text,
            params=self.params_snapshot(),
            placeholder=self.placeholder,
        )
        logger.debug("Built statement with %d param(s): %s", len(compiled.params), compiled.sql)
        if self._settings.verify_on_build:
            compiled.verify()
        return compiled
