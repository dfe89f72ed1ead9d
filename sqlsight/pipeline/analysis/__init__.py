"""
Result analysis (column types, chart recommendation, insights)
"""
from sqlsight.pipeline.analysis.type_inference import infer_column_kind, infer_column_types
from sqlsight.pipeline.analysis.chart_recommender import recommend_chart
from sqlsight.pipeline.analysis.insight_generator import (
    find_outliers,
    generate_follow_up_questions,
    generate_insights,
)

__all__ = [
    "infer_column_kind",
    "infer_column_types",
    "recommend_chart",
    "find_outliers",
    "generate_follow_up_questions",
    "generate_insights",
]
