"""
Service for query execution orchestration
Gateway → execution → enrichment, with one audit record per request
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from sqlsight.dtos import QueryAuditRecord, QueryExecutionContext
from sqlsight.pipeline.sql import (
    execute_statements_on_conn,
    explain_sql,
    suggest_correction,
    validate_and_sanitize,
)
from sqlsight.services.enrichment_service import EnrichmentService

logger = logging.getLogger(__name__)

AuditSink = Callable[[QueryAuditRecord], None]


def log_audit_record(record: QueryAuditRecord) -> None:
    """Default audit sink: write the record to the log"""
    logger.info(
        f"Audit log: status={record.status}, rows={record.result_count}, "
        f"duration={record.execution_time_ms}ms, error={record.error_message}"
    )


class QueryService:
    """
    Orchestrates query execution pipeline
    Handles validation, execution, error suggestions and enrichment
    """

    def __init__(
        self,
        enrichment_service: Optional[EnrichmentService] = None,
        audit_sink: Optional[AuditSink] = None
    ):
        self.enrichment_service = enrichment_service or EnrichmentService()
        self.audit_sink = audit_sink or log_audit_record

    def run_sql(
        self,
        conn: Connection,
        sql: str,
        question: str = "",
        max_rows: Optional[int] = None
    ) -> QueryExecutionContext:
        """
        Validate, execute and enrich one SQL query

        Never raises for rejected or failing queries: the outcome is in
        ctx.status (success, rejected, error) and ctx.error_message.

        Args:
            conn: Open SQLAlchemy connection (its dialect drives parsing)
            sql: Untrusted SQL text (e.g. LLM output)
            question: Natural-language question the SQL answers
            max_rows: Fetch cap (defaults to settings.MAX_RESULT_ROWS)

        Returns:
            Filled QueryExecutionContext
        """
        ctx = QueryExecutionContext(
            question=question,
            sql_generated=sql,
            max_rows=max_rows,
            dialect=conn.dialect.name,
            started_at=datetime.utcnow(),
        )

        try:
            self._execute(conn, ctx)
        finally:
            ctx.completed_at = datetime.utcnow()
            self._audit(ctx)

        return ctx

    def _execute(self, conn: Connection, ctx: QueryExecutionContext) -> None:
        verdict = validate_and_sanitize(ctx.sql_generated, dialect=ctx.dialect)
        if not verdict.is_valid:
            ctx.status = "rejected"
            ctx.error_message = verdict.error
            logger.warning(f"Query rejected by gateway: {verdict.error}")
            return

        ctx.sql_executed = verdict.sanitized_query
        ctx.explanation = explain_sql(ctx.sql_executed, dialect=ctx.dialect)

        try:
            result = execute_statements_on_conn(conn, verdict.statements, max_rows=ctx.max_rows)
        except SQLAlchemyError as err:
            # Surface the error with a tip; retrying is the caller's decision
            message = str(getattr(err, "orig", None) or err)
            ctx.status = "error"
            ctx.error_message = message
            ctx.suggestion = suggest_correction(ctx.sql_executed, message)
            logger.warning(f"Query execution failed: {message}")
            return

        ctx.columns = result.columns
        ctx.rows = result.rows
        ctx.row_count = result.row_count
        ctx.duration_ms = result.execution_time_ms

        self.enrichment_service.enrich(ctx)
        ctx.status = "success"

    def _audit(self, ctx: QueryExecutionContext) -> None:
        """Best-effort: audit failures never break the user flow"""
        try:
            self.audit_sink(ctx.to_audit_record())
        except Exception as e:
            logger.warning(f"Failed to write audit log: {e}")
