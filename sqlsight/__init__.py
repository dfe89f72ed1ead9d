"""
sqlsight: read-only SQL safety gateway and query result analysis
"""
from sqlsight.dtos import (
    ChartRecommendation,
    ColumnTypeInfo,
    ErrorKind,
    Insight,
    ValidationVerdict,
)
from sqlsight.pipeline.sql import (
    SQLParseError,
    explain_sql,
    parse_sql,
    suggest_correction,
    validate_and_sanitize,
)
from sqlsight.pipeline.analysis import (
    generate_follow_up_questions,
    generate_insights,
    infer_column_types,
    recommend_chart,
)

__all__ = [
    "ChartRecommendation",
    "ColumnTypeInfo",
    "ErrorKind",
    "Insight",
    "ValidationVerdict",
    "SQLParseError",
    "explain_sql",
    "parse_sql",
    "suggest_correction",
    "validate_and_sanitize",
    "generate_follow_up_questions",
    "generate_insights",
    "infer_column_types",
    "recommend_chart",
]
