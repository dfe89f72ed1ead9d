"""
Result Analysis Controller
Chart recommendation, insights and follow-up questions for query results
"""
import logging
from fastapi import APIRouter
from sqlsight.dtos import ChartRecommendation
from sqlsight.schemas import (
    ResultSetRequest,
    InsightsResponse,
    FollowUpsResponse,
    AnalysisResponse,
)
from sqlsight.pipeline.analysis import (
    generate_follow_up_questions,
    generate_insights,
    infer_column_types,
    recommend_chart,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analysis", tags=["Analysis"])


@router.post("", response_model=AnalysisResponse)
def analyze(req: ResultSetRequest):
    """
    Full analysis of a result set

    Example request:
    {
        "columns": ["region", "revenue"],
        "rows": [{"region": "North", "revenue": 1200}, ...],
        "question": "Revenue by region"
    }
    """
    logger.info(f"Analyzing {len(req.rows)} row(s) x {len(req.columns)} column(s)")

    return AnalysisResponse(
        column_types=infer_column_types(req.rows, req.columns),
        chart=recommend_chart(req.rows, req.columns),
        insights=generate_insights(req.rows, req.columns, req.question),
        follow_up_questions=generate_follow_up_questions(req.rows, req.columns, req.question),
    )


@router.post("/chart", response_model=ChartRecommendation)
def chart(req: ResultSetRequest):
    """Recommend chart type and axes"""
    return recommend_chart(req.rows, req.columns)


@router.post("/insights", response_model=InsightsResponse)
def insights(req: ResultSetRequest):
    """Natural-language insights"""
    return InsightsResponse(insights=generate_insights(req.rows, req.columns, req.question))


@router.post("/follow-ups", response_model=FollowUpsResponse)
def follow_ups(req: ResultSetRequest):
    """Suggested follow-up questions"""
    return FollowUpsResponse(questions=generate_follow_up_questions(req.rows, req.columns, req.question))
