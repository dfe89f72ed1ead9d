from pydantic import BaseModel
from typing import Any, Dict, List, Optional
from sqlsight.dtos import ChartRecommendation, ColumnTypeInfo, Insight


class ExecuteQueryRequest(BaseModel):
    database_url: str
    sql: str
    question: str = ""
    max_rows: Optional[int] = None


class ExecuteQueryResponse(BaseModel):
    status: str  # success, error
    sql_executed: Optional[str] = None
    explanation: Optional[str] = None
    columns: List[str] = []
    rows: List[Dict[str, Any]] = []
    row_count: Optional[int] = None
    duration_ms: Optional[int] = None
    column_types: List[ColumnTypeInfo] = []
    chart: Optional[ChartRecommendation] = None
    insights: List[Insight] = []
    follow_up_questions: List[str] = []
    error: Optional[str] = None
    suggestion: Optional[str] = None
