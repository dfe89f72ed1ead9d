"""
Column type inference for query results
"""
import math
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from sqlsight.dtos.analysis import ColumnKind, ColumnTypeInfo

# Share of non-null values a predicate must cover
TYPE_THRESHOLD = 0.8

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}|\d{2}/\d{2}/\d{4}|^\d{13}$")
BOOLEAN_PATTERN = re.compile(r"^(true|false|yes|no|0|1)$", re.I)

# Unix timestamps (seconds .. milliseconds)
_TIMESTAMP_MIN = 1_000_000_000
_TIMESTAMP_MAX = 9_999_999_999_999


def to_number(value: Any) -> Optional[float]:
    """Numeric value of a cell, or None if it does not parse as a finite number"""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, Decimal, str)):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (OverflowError, ValueError):
        # Huge ints, Decimal("sNaN"), non-numeric text
        return None
    return number if math.isfinite(number) else None


def column_values(rows: Sequence[Dict[str, Any]], column: str) -> List[Any]:
    """Non-null values of a column, in row order"""
    return [row.get(column) for row in rows if row.get(column) is not None]


def _is_date_like(value: Any) -> bool:
    if isinstance(value, (date, datetime)):
        return True
    if isinstance(value, str):
        return DATE_PATTERN.search(value) is not None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _TIMESTAMP_MIN < value < _TIMESTAMP_MAX
    return False


def _is_boolean_like(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    if isinstance(value, (int, float)):
        return value in (0, 1)
    if isinstance(value, str):
        return BOOLEAN_PATTERN.match(value.strip()) is not None
    return False


def _share(values: List[Any], predicate) -> float:
    return sum(1 for v in values if predicate(v)) / len(values)


def infer_column_kind(values: List[Any]) -> ColumnKind:
    """
    Classify non-null column values

    Checks run in fixed order (numeric, date, boolean) and the first
    one covering >= 80% of the values wins; "0"/"1" therefore count
    as numeric before boolean.
    """
    if not values:
        return ColumnKind.UNKNOWN

    if _share(values, lambda v: to_number(v) is not None) >= TYPE_THRESHOLD:
        return ColumnKind.NUMERIC

    if _share(values, _is_date_like) >= TYPE_THRESHOLD:
        return ColumnKind.DATE

    if _share(values, _is_boolean_like) >= TYPE_THRESHOLD:
        return ColumnKind.BOOLEAN

    return ColumnKind.CATEGORICAL


def infer_column_types(rows: Sequence[Dict[str, Any]], columns: Sequence[str]) -> List[ColumnTypeInfo]:
    """Infer the kind of every column, in column order"""
    return [
        ColumnTypeInfo(name=column, kind=infer_column_kind(column_values(rows, column)))
        for column in columns
    ]
