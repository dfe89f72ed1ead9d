"""
Service for query result enrichment
Column types, chart recommendation, insights and follow-up questions
"""
import logging
from sqlsight.dtos import QueryExecutionContext
from sqlsight.pipeline.analysis import (
    generate_follow_up_questions,
    generate_insights,
    infer_column_types,
    recommend_chart,
)

logger = logging.getLogger(__name__)


class EnrichmentService:
    """
    Handles result enrichment
    Each branch is independent: a failure leaves only that branch empty
    """

    def enrich(self, ctx: QueryExecutionContext) -> None:
        """
        Enrich query results in place

        Sets ctx.column_types, ctx.chart, ctx.insights and
        ctx.follow_up_questions
        """
        rows = ctx.rows or []
        columns = ctx.columns or []

        try:
            ctx.column_types = infer_column_types(rows, columns)
        except Exception as e:
            logger.warning(f"Failed to infer column types: {e}")
            ctx.column_types = []

        try:
            ctx.chart = recommend_chart(rows, columns)
            logger.info(f"Chart recommended: {ctx.chart.type.value}")
        except Exception as e:
            logger.warning(f"Failed to recommend chart: {e}")
            ctx.chart = None

        try:
            ctx.insights = generate_insights(rows, columns, ctx.question)
        except Exception as e:
            logger.warning(f"Failed to generate insights: {e}")
            ctx.insights = []

        try:
            ctx.follow_up_questions = generate_follow_up_questions(rows, columns, ctx.question)
        except Exception as e:
            logger.warning(f"Failed to generate follow-up questions: {e}")
            ctx.follow_up_questions = []
