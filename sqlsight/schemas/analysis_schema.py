"""
Result analysis schemas
"""
from pydantic import BaseModel
from typing import Any, Dict, List, Optional
from sqlsight.dtos import ChartRecommendation, ColumnTypeInfo, Insight


class ResultSetRequest(BaseModel):
    """Rows returned by a query, as records"""
    rows: List[Dict[str, Any]]
    columns: List[str]
    question: str = ""


class InsightsResponse(BaseModel):
    insights: List[Insight]


class FollowUpsResponse(BaseModel):
    questions: List[str]


class AnalysisResponse(BaseModel):
    column_types: List[ColumnTypeInfo]
    chart: ChartRecommendation
    insights: List[Insight]
    follow_up_questions: List[str]
