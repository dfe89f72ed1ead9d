"""
Query execution context DTOs
"""
from typing import Optional, List, Dict, Any
from datetime import datetime
from pydantic import BaseModel
from sqlsight.dtos.analysis import ChartRecommendation, ColumnTypeInfo, Insight


class ExecutionResult(BaseModel):
    """
    Rows returned by the SQL execution collaborator
    """
    columns: List[str]
    rows: List[Dict[str, Any]]
    row_count: int
    execution_time_ms: int


class QueryAuditRecord(BaseModel):
    """
    One audit/history entry per request
    Handed to an external audit sink, never persisted here
    """
    prompt: str
    sql_query: str
    result_count: Optional[int] = None
    execution_time_ms: Optional[int] = None
    status: str  # success, rejected, error
    error_message: Optional[str] = None


class QueryExecutionContext(BaseModel):
    """
    Encapsulates the full context of a query execution
    Passed between service layers
    """
    # Input
    question: str
    sql_generated: str
    max_rows: Optional[int] = None
    dialect: Optional[str] = None

    # Gateway
    sql_executed: Optional[str] = None
    explanation: Optional[str] = None

    # Results
    columns: Optional[List[str]] = None
    rows: Optional[List[Dict[str, Any]]] = None
    row_count: Optional[int] = None
    duration_ms: Optional[int] = None

    # Enrichment
    column_types: List[ColumnTypeInfo] = []
    chart: Optional[ChartRecommendation] = None
    insights: List[Insight] = []
    follow_up_questions: List[str] = []

    # Outcome
    status: str = "pending"  # pending, success, rejected, error
    error_message: Optional[str] = None
    suggestion: Optional[str] = None

    # Metadata
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    def to_audit_record(self) -> QueryAuditRecord:
        return QueryAuditRecord(
            prompt=self.question,
            sql_query=self.sql_executed or self.sql_generated,
            result_count=self.row_count,
            execution_time_ms=self.duration_ms,
            status=self.status,
            error_message=self.error_message,
        )
