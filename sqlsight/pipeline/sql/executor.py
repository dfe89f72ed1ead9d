"""
SQL Executor
Executes sanitized, read-only SQL queries
"""
import logging
import time
from typing import Optional, Sequence
from sqlalchemy.engine import Connection

from sqlsight.core.config import settings
from sqlsight.dtos.query import ExecutionResult

logger = logging.getLogger(__name__)

# Hand the text to the driver untouched: no ":name" binds, no "%" formatting
_VERBATIM = {"no_parameters": True}


def execute_readonly_on_conn(
    conn: Connection,
    sql: str,
    max_rows: Optional[int] = None
) -> ExecutionResult:
    """
    Execute one already-sanitized statement and return rows as dicts

    The statement text is run exactly as approved; at most max_rows rows
    (default settings.MAX_RESULT_ROWS) are fetched.
    Errors propagate as sqlalchemy.exc.SQLAlchemyError.
    """
    limit = max_rows or settings.MAX_RESULT_ROWS

    t0 = time.perf_counter()
    rs = conn.exec_driver_sql(sql, execution_options=_VERBATIM)
    cols = list(rs.keys())
    rows = [dict(zip(cols, row)) for row in rs.fetchmany(limit)]
    rs.close()
    duration_ms = int((time.perf_counter() - t0) * 1000)

    logger.info(f"Executed query: {len(rows)} row(s) in {duration_ms}ms")

    return ExecutionResult(
        columns=cols,
        rows=rows,
        row_count=len(rows),
        execution_time_ms=duration_ms,
    )


def execute_statements_on_conn(
    conn: Connection,
    statements: Sequence[str],
    max_rows: Optional[int] = None
) -> ExecutionResult:
    """
    Execute approved statements in order, one driver call each

    Returns the last statement's result set; execution_time_ms covers
    all of them.
    """
    if not statements:
        raise ValueError("No statements to execute")

    total_ms = 0
    result = None
    for sql in statements:
        result = execute_readonly_on_conn(conn, sql, max_rows=max_rows)
        total_ms += result.execution_time_ms

    return result.model_copy(update={"execution_time_ms": total_ms})
