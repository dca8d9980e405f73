"""Typed predicate models for the WHERE / HAVING builders.

Every predicate renders itself to a ``(text, params)`` pair in one step, so
the number of placeholder markers it emits always equals the number of
parameters it returns.  Raw dicts are accepted too; Pydantic's discriminated
union picks the model from the keys present::

    from fluentsql.schema.predicates import to_predicate

    to_predicate({"column": "age", "op": ">", "value": 18})   # -> Comparison
    to_predicate({"sql": "age > ?", "params": [18]})            # -> RawPredicate
    to_predicate({"column": "deleted_at", "is_null": True})     # -> NullCheck
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from fluentsql.errors import ClauseError
from fluentsql.schema.operators import ComparisonOp, to_operator

_FORBID = ConfigDict(extra="forbid")

#: A rendered fragment: SQL text plus the parameters it binds, in order.
Fragment = tuple[str, list[Any]]


class Comparison(BaseModel):
    """``<column> <op> ?`` with one bound value."""

    model_config = _FORBID

    column: str
    op: ComparisonOp
    value: Any

    @field_validator("op", mode="before")
    @classmethod
    def _resolve_op(cls, value: Any) -> ComparisonOp:
        try:
            return to_operator(value)
        except ClauseError as exc:
            raise ValueError(str(exc)) from exc

    def render(self, placeholder: str) -> Fragment:
        return f"{self.column} {self.op.value} {placeholder}", [self.value]


class RawPredicate(BaseModel):
    """A verbatim SQL fragment with its own explicit parameter list.

    The caller is responsible for writing one placeholder marker per entry
    in ``params``.
    """

    model_config = _FORBID

    sql: str
    params: list[Any] = Field(default_factory=list)

    def render(self, placeholder: str) -> Fragment:
        return self.sql, list(self.params)


class NullCheck(BaseModel):
    """``<column> IS NULL`` / ``<column> IS NOT NULL``; binds nothing."""

    model_config = _FORBID

    column: str
    is_null: bool = True

    def render(self, placeholder: str) -> Fragment:
        keyword = "IS NULL" if self.is_null else "IS NOT NULL"
        return f"{self.column} {keyword}", []


class Membership(BaseModel):
    """``<column> IN (?,?,...)`` with one parameter per value."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    column: str
    # "in" is a Python keyword; stored as ``values``, alias ``"in"``.
    values: list[Any] = Field(alias="in", min_length=1)

    def render(self, placeholder: str) -> Fragment:
        markers = ",".join(placeholder for _ in self.values)
        return f"{self.column} IN ({markers})", list(self.values)


class Range(BaseModel):
    """``<column> BETWEEN ? AND ?``."""

    model_config = _FORBID

    column: str
    low: Any
    high: Any

    def render(self, placeholder: str) -> Fragment:
        return (
            f"{self.column} BETWEEN {placeholder} AND {placeholder}",
            [self.low, self.high],
        )


# ---------------------------------------------------------------------------
# Discriminated union
# ---------------------------------------------------------------------------


def _predicate_discriminator(v: Any) -> str | None:
    """Return the tag for the Pydantic discriminated union."""
    if isinstance(v, dict):
        if "sql" in v:
            return "raw"
        if "op" in v:
            return "comparison"
        if "is_null" in v:
            return "null"
        if "in" in v or "values" in v:
            return "in"
        if "low" in v or "high" in v:
            return "between"
        return None
    for tag, model in _TAGGED_MODELS.items():
        if isinstance(v, model):
            return tag
    return None


_TAGGED_MODELS: dict[str, type[BaseModel]] = {
    "comparison": Comparison,
    "raw": RawPredicate,
    "null": NullCheck,
    "in": Membership,
    "between": Range,
}

Predicate = Annotated[
    Annotated[Comparison, Tag("comparison")]
    | Annotated[RawPredicate, Tag("raw")]
    | Annotated[NullCheck, Tag("null")]
    | Annotated[Membership, Tag("in")]
    | Annotated[Range, Tag("between")],
    Discriminator(_predicate_discriminator),
]

PREDICATE_ADAPTER: TypeAdapter[Predicate] = TypeAdapter(Predicate)


def to_predicate(v: dict[str, Any] | Predicate) -> Predicate:
    """Convert a raw predicate dict to a typed model, or return it as-is.

    Raises:
        ClauseError: If ``v`` does not describe a valid predicate.
    """
    if isinstance(v, tuple(_TAGGED_MODELS.values())):
        return v
    try:
        return PREDICATE_ADAPTER.validate_python(v)
    except ValidationError as exc:
        raise ClauseError(f"Invalid predicate {v!r}: {exc}") from exc
