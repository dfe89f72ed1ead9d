"""Tests for column type inference."""
from datetime import date, datetime
from decimal import Decimal

import pytest

from sqlsight.dtos import ColumnKind
from sqlsight.pipeline.analysis import infer_column_kind, infer_column_types
from sqlsight.pipeline.analysis.type_inference import to_number


@pytest.mark.parametrize("values, kind", [
    ([1, 2, 3], ColumnKind.NUMERIC),
    (["1.5", "2", " 3 "], ColumnKind.NUMERIC),
    ([Decimal("9.99"), 4], ColumnKind.NUMERIC),
    (["0", "1", "1", "0"], ColumnKind.NUMERIC),
    ([1700000000000, 1700000100000], ColumnKind.NUMERIC),
    (["2024-01-05", "2024-02-10"], ColumnKind.DATE),
    (["05/01/2024", "10/02/2024"], ColumnKind.DATE),
    (["2024-01-05T10:00:00", "2024-01-06 11:30:00"], ColumnKind.DATE),
    ([date(2024, 1, 5), datetime(2024, 1, 6, 12, 0)], ColumnKind.DATE),
    (["yes", "No", "TRUE", "false"], ColumnKind.BOOLEAN),
    ([True, False, True], ColumnKind.BOOLEAN),
    (["North", "South", "East"], ColumnKind.CATEGORICAL),
    ([], ColumnKind.UNKNOWN),
])
def test_infer_column_kind(values, kind):
    assert infer_column_kind(values) is kind


@pytest.mark.parametrize("value", [10 ** 400, -(10 ** 400), Decimal("sNaN"), Decimal("NaN"), "1e400"])
def test_unrepresentable_numbers_are_not_numeric(value):
    assert to_number(value) is None


def test_huge_ints_do_not_break_inference():
    assert infer_column_kind([10 ** 400, "a", "b"]) is ColumnKind.CATEGORICAL


def test_threshold_is_inclusive():
    assert infer_column_kind([1, 2, 3, 4, "n/a"]) is ColumnKind.NUMERIC
    assert infer_column_kind([1, 2, 3, "n/a", "?"]) is ColumnKind.CATEGORICAL


def test_nulls_are_ignored():
    rows = [{"a": None, "b": 1}, {"a": None, "b": None}, {"a": None, "b": 3}]

    types = infer_column_types(rows, ["a", "b"])

    assert [(t.name, t.kind) for t in types] == [
        ("a", ColumnKind.UNKNOWN),
        ("b", ColumnKind.NUMERIC),
    ]


def test_missing_column_is_unknown():
    assert infer_column_types([{"a": 1}], ["zzz"])[0].kind is ColumnKind.UNKNOWN


@pytest.mark.parametrize("value, expected", [
    (3, 3.0),
    ("4.5", 4.5),
    (Decimal("2.5"), 2.5),
    (True, None),
    ("", None),
    ("nan", None),
    ("abc", None),
    (None, None),
])
def test_to_number(value, expected):
    assert to_number(value) == expected
