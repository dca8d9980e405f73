"""fluentSQL schema layer: predicate models, operators and settings."""
from fluentsql.schema.operators import ComparisonOp, to_operator
from fluentsql.schema.predicates import (
    Comparison,
    Membership,
    NullCheck,
    Predicate,
    Range,
    RawPredicate,
    to_predicate,
)
from fluentsql.schema.settings import DEFAULT_SETTINGS, StatementSettings

__all__ = [
    "ComparisonOp",
    "to_operator",
    "Comparison",
    "Membership",
    "NullCheck",
    "Predicate",
    "Range",
    "RawPredicate",
    "to_predicate",
    "DEFAULT_SETTINGS",
    "StatementSettings",
]
