from .sql_schema import (
    SQLRequest,
    ValidateSQLResponse,
    ExplainSQLResponse,
    SuggestCorrectionRequest,
    SuggestCorrectionResponse,
)
from .analysis_schema import (
    ResultSetRequest,
    InsightsResponse,
    FollowUpsResponse,
    AnalysisResponse,
)
from .query_schema import ExecuteQueryRequest, ExecuteQueryResponse

__all__ = [
    "SQLRequest",
    "ValidateSQLResponse",
    "ExplainSQLResponse",
    "SuggestCorrectionRequest",
    "SuggestCorrectionResponse",
    "ResultSetRequest",
    "InsightsResponse",
    "FollowUpsResponse",
    "AnalysisResponse",
    "ExecuteQueryRequest",
    "ExecuteQueryResponse",
]
