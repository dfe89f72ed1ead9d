"""
Result analysis DTOs
"""
from sqlsight.dtos.analysis.chart import ChartKind, ChartRecommendation
from sqlsight.dtos.analysis.columns import ColumnKind, ColumnTypeInfo
from sqlsight.dtos.analysis.insight import Confidence, Insight, InsightKind

__all__ = [
    "ChartKind",
    "ChartRecommendation",
    "ColumnKind",
    "ColumnTypeInfo",
    "Confidence",
    "Insight",
    "InsightKind",
]
