"""
SQL Gateway Controller
Endpoints for validating, explaining and correcting SQL
"""
import logging
from fastapi import APIRouter
from sqlsight.schemas import (
    SQLRequest,
    ValidateSQLResponse,
    ExplainSQLResponse,
    SuggestCorrectionRequest,
    SuggestCorrectionResponse,
)
from sqlsight.pipeline.sql import explain_sql, suggest_correction, validate_and_sanitize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sql", tags=["SQL"])


@router.post("/validate", response_model=ValidateSQLResponse)
def validate_sql(req: SQLRequest):
    """
    Validate untrusted SQL and return the sanitized query to execute

    Example request:
    {
        "query": "select name from users where id = 1",
        "dialect": "postgresql"  // optional
    }

    A rejection is a normal response with is_valid=false and the reason.
    """
    verdict = validate_and_sanitize(req.query, dialect=req.dialect)

    return ValidateSQLResponse(
        is_valid=verdict.is_valid,
        sanitized_query=verdict.sanitized_query,
        error=verdict.error,
        error_kind=verdict.error_kind,
    )


@router.post("/explain", response_model=ExplainSQLResponse)
def explain(req: SQLRequest):
    """Describe a (validated) query in one sentence"""
    return ExplainSQLResponse(explanation=explain_sql(req.query, dialect=req.dialect))


@router.post("/suggest-correction", response_model=SuggestCorrectionResponse)
def suggest(req: SuggestCorrectionRequest):
    """Tips for a query that failed on the database"""
    return SuggestCorrectionResponse(suggestion=suggest_correction(req.query, req.error))
