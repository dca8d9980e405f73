"""Shared plumbing for the per-statement-kind facades.

A facade owns one :class:`StatementBuilder` and at most one clause builder
per clause kind.  Clause builders are created on first use and reused, so
repeated ``where(...)`` calls extend the same ``WHERE`` clause.

Text is written in call order.  Configuring clauses out of SQL grammar order
(e.g. ``having`` before ``where``) produces text in that same order; keeping
calls in grammar order is the caller's job.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from fluentsql.schema.settings import StatementSettings
from fluentsql.statement.base import CompiledStatement, StatementBuilder

_B = TypeVar("_B")

#: A clause configuration callback; its return value is ignored.
Configure = Callable[[_B], Any]


class StatementFacade:
    """Base class for :class:`SelectStatement` and :class:`ReplaceStatement`.

    Not thread-safe: one facade belongs to one caller.
    """

    def __init__(self, settings: StatementSettings | None = None) -> None:
        self._stmt = StatementBuilder(settings)
        self._clauses: dict[type, Any] = {}

    def _clause(self, builder_cls: type[_B]) -> _B:
        builder = self._clauses.get(builder_cls)
        if builder is None:
            builder = builder_cls(self._stmt)
            self._clauses[builder_cls] = builder
        return builder

    def _configure(self, builder_cls: type[_B], configure: Configure[_B]) -> _B:
        builder = self._clause(builder_cls)
        configure(builder)
        return builder

    @property
    def statement(self) -> StatementBuilder:
        """The underlying statement core."""
        return self._stmt

    @property
    def sql(self) -> str:
        return self._stmt.text

    def build(self) -> CompiledStatement:
        """Return the finished ``(sql, params)`` snapshot.

        Idempotent; safe to call more than once.
        """
        return self._stmt.build()

    def __str__(self) -> str:
        return self._stmt.text

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sql={self._stmt.text!r}, "
            f"params={list(self._stmt.params_snapshot())!r})"
        )
