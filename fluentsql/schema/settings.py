"""Pydantic model for per-statement build settings.

Settings are frozen so a single instance (including :data:`DEFAULT_SETTINGS`)
can be shared between independent builds on different threads::

    from fluentsql import StatementSettings, select

    pg_style = StatementSettings(placeholder="%s")
    stmt = select("id", settings=pg_style).from_("users").build()
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from fluentsql.errors import SettingsError


class StatementSettings(BaseModel):
    """Controls how clause builders render placeholders and finish statements.

    Attributes:
        placeholder: Positional bind marker emitted for every parameter
            (``'?'`` for qmark drivers such as ``sqlite3``, ``'%s'`` for
            format-style drivers).
        verify_on_build: Run :meth:`CompiledStatement.verify` on every
            ``build()`` call.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    placeholder: str = "?"
    verify_on_build: bool = False

    @field_validator("placeholder")
    @classmethod
    def _placeholder_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("placeholder must be a non-blank marker")
        return value

    @classmethod
    def parse(cls, data: dict[str, Any]) -> StatementSettings:
        """Build settings from a plain mapping.

        Raises:
            SettingsError: If ``data`` has unknown keys or invalid values.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise SettingsError(f"Invalid statement settings: {exc}") from exc


DEFAULT_SETTINGS = StatementSettings()


def resolve_settings(
    settings: StatementSettings | dict[str, Any] | None,
) -> StatementSettings:
    """Normalise the ``settings`` argument accepted by the entry points."""
    if settings is None:
        return DEFAULT_SETTINGS
    if isinstance(settings, StatementSettings):
        return settings
    return StatementSettings.parse(settings)
