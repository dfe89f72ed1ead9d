"""
DTOs (Data Transfer Objects)
Internal objects for passing data between layers
"""
from sqlsight.dtos.analysis import (
    ChartKind,
    ChartRecommendation,
    ColumnKind,
    ColumnTypeInfo,
    Confidence,
    Insight,
    InsightKind,
)
from sqlsight.dtos.query import (
    ErrorKind,
    ExecutionResult,
    QueryAuditRecord,
    QueryExecutionContext,
    ValidationVerdict,
)

__all__ = [
    "ChartKind",
    "ChartRecommendation",
    "ColumnKind",
    "ColumnTypeInfo",
    "Confidence",
    "Insight",
    "InsightKind",
    "ErrorKind",
    "ExecutionResult",
    "QueryAuditRecord",
    "QueryExecutionContext",
    "ValidationVerdict",
]
