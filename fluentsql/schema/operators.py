"""Comparison operators understood by the WHERE / HAVING builders.

Callers may pass either a :class:`ComparisonOp` member or its SQL symbol;
:func:`to_operator` normalises both forms.
"""

from __future__ import annotations

from enum import Enum

from fluentsql.errors import ClauseError


class ComparisonOp(str, Enum):
    """Binary operators rendered as ``<column> <op> ?``."""

    EQ = "="
    NE = "<>"
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    LIKE = "LIKE"
    NOT_LIKE = "NOT LIKE"


# Extra spellings accepted on input.
_ALIASES: dict[str, ComparisonOp] = {
    "!=": ComparisonOp.NE,
    "==": ComparisonOp.EQ,
}


def to_operator(op: ComparisonOp | str) -> ComparisonOp:
    """Resolve ``op`` to a :class:`ComparisonOp`.

    Accepts enum members, SQL symbols (``'>='``, ``'like'``) and enum names
    (``'GTE'``).

    Raises:
        ClauseError: If ``op`` is not a known comparison operator.
    """
    if isinstance(op, ComparisonOp):
        return op
    if not isinstance(op, str):
        raise ClauseError(f"Unknown comparison operator: {op!r}")
    symbol = " ".join(op.split()).upper()
    if symbol in _ALIASES:
        return _ALIASES[symbol]
    try:
        return ComparisonOp(symbol)
    except ValueError:
        pass
    try:
        return ComparisonOp[symbol.replace(" ", "_")]
    except KeyError:
        raise ClauseError(f"Unknown comparison operator: {op!r}") from None
