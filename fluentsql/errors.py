"""Custom exception hierarchy for fluentSQL.

All public errors inherit from FluentSQLError so callers can catch the base
class for any fluentSQL-specific failure.

The statement core itself never raises: ``append`` and ``add_params`` are
plain buffer mutations.  Errors only surface when a clause is configured in a
shape it cannot render, or when a caller opts into placeholder verification.
"""
from __future__ import annotations


class FluentSQLError(Exception):
    """Base exception for all fluentSQL errors."""


class ClauseError(FluentSQLError):
    """Raised when a clause builder receives input it cannot render.

    Args:
        message: Human-readable description.
        clause: The clause being configured (e.g. ``'WHERE'``, ``'VALUES'``).
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause


class PlaceholderMismatchError(FluentSQLError):
    """Raised by :meth:`CompiledStatement.verify` when the number of
    placeholder markers in the SQL text differs from the parameter count.

    Args:
        message: Human-readable description.
        markers: Placeholder markers found in the SQL text.
        params: Parameters collected for the statement.
    """

    def __init__(self, message: str, markers: int, params: int) -> None:
        super().__init__(message)
        self.markers = markers
        self.params = params


class SettingsError(FluentSQLError):
    """Raised when :class:`StatementSettings` is misconfigured."""
