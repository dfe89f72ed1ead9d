"""
Query Controller
Runs LLM-proposed SQL against a database through the gateway
"""
import logging
from fastapi import APIRouter, HTTPException
from sqlalchemy import create_engine
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from sqlsight.schemas import ExecuteQueryRequest, ExecuteQueryResponse
from sqlsight.services import QueryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/query", tags=["Query"])


@router.post("/execute", response_model=ExecuteQueryResponse)
def execute_query(req: ExecuteQueryRequest):
    """
    Validate, execute and analyze one SQL query

    Rejected queries answer 400 with the reason; execution errors are
    returned with status="error" and a correction suggestion.
    """
    try:
        eng = create_engine(req.database_url, pool_pre_ping=True)
    except (ArgumentError, ImportError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid database_url: {e}")

    try:
        with eng.connect() as conn:
            ctx = QueryService().run_sql(conn, req.sql, question=req.question, max_rows=req.max_rows)
    except SQLAlchemyError as e:
        logger.warning(f"Database connection failed: {e}")
        raise HTTPException(status_code=502, detail="Could not connect to the database.")
    finally:
        eng.dispose()

    if ctx.status == "rejected":
        raise HTTPException(status_code=400, detail=ctx.error_message)

    return ExecuteQueryResponse(
        status=ctx.status,
        sql_executed=ctx.sql_executed,
        explanation=ctx.explanation,
        columns=ctx.columns or [],
        rows=ctx.rows or [],
        row_count=ctx.row_count,
        duration_ms=ctx.duration_ms,
        column_types=ctx.column_types,
        chart=ctx.chart,
        insights=ctx.insights,
        follow_up_questions=ctx.follow_up_questions,
        error=ctx.error_message,
        suggestion=ctx.suggestion,
    )
