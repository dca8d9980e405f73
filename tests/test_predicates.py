"""Unit tests for predicate models and comparison operators."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fluentsql.errors import ClauseError
from fluentsql.schema.operators import ComparisonOp, to_operator
from fluentsql.schema.predicates import (
    Comparison,
    Membership,
    NullCheck,
    Range,
    RawPredicate,
    to_predicate,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (ComparisonOp.GT, ComparisonOp.GT),
        (">", ComparisonOp.GT),
        ("!=", ComparisonOp.NE),
        ("<>", ComparisonOp.NE),
        ("==", ComparisonOp.EQ),
        ("like", ComparisonOp.LIKE),
        ("not  like", ComparisonOp.NOT_LIKE),
        ("GTE", ComparisonOp.GTE),
        ("not_like", ComparisonOp.NOT_LIKE),
    ],
)
def test_to_operator(raw, expected):
    assert to_operator(raw) is expected


def test_to_operator_unknown():
    with pytest.raises(ClauseError):
        to_operator("SOUNDS LIKE")


def test_comparison_render():
    assert Comparison(column="age", op=">", value=18).render("?") == ("age > ?", [18])


def test_comparison_rejects_unknown_operator():
    with pytest.raises(ValidationError):
        Comparison(column="age", op="=>", value=18)


def test_raw_render_copies_params():
    raw = RawPredicate(sql="a = ? OR b = ?", params=[1, 2])
    text, params = raw.render("?")
    params.append(3)
    assert text == "a = ? OR b = ?"
    assert raw.params == [1, 2]


def test_null_check_render():
    assert NullCheck(column="x").render("?") == ("x IS NULL", [])
    assert NullCheck(column="x", is_null=False).render("?") == ("x IS NOT NULL", [])


def test_membership_render_and_alias():
    by_alias = Membership.model_validate({"column": "id", "in": [1, 2]})
    by_name = Membership(column="id", values=[1, 2])
    assert by_alias == by_name
    assert by_alias.render("%s") == ("id IN (%s,%s)", [1, 2])


def test_membership_requires_values():
    with pytest.raises(ValidationError):
        Membership(column="id", values=[])


def test_range_render():
    assert Range(column="age", low=1, high=9).render("?") == ("age BETWEEN ? AND ?", [1, 9])


@pytest.mark.parametrize(
    ("data", "model"),
    [
        ({"column": "age", "op": ">", "value": 18}, Comparison),
        ({"sql": "age > ?", "params": [18]}, RawPredicate),
        ({"column": "deleted_at", "is_null": True}, NullCheck),
        ({"column": "id", "in": [1]}, Membership),
        ({"column": "age", "low": 1, "high": 2}, Range),
    ],
)
def test_to_predicate_dispatches_on_keys(data, model):
    assert isinstance(to_predicate(data), model)


def test_to_predicate_returns_models_unchanged():
    pred = NullCheck(column="x")
    assert to_predicate(pred) is pred


def test_to_predicate_rejects_extra_keys():
    with pytest.raises(ClauseError):
        to_predicate({"column": "age", "op": ">", "value": 1, "extra": True})


@pytest.mark.parametrize("raw", [None, 3, ["="]])
def test_to_operator_rejects_non_strings(raw):
    with pytest.raises(ClauseError):
        to_operator(raw)
