"""
Query DTOs
"""
from sqlsight.dtos.query.context import ExecutionResult, QueryAuditRecord, QueryExecutionContext
from sqlsight.dtos.query.validation import ErrorKind, ValidationVerdict

__all__ = [
    "ExecutionResult",
    "QueryAuditRecord",
    "QueryExecutionContext",
    "ErrorKind",
    "ValidationVerdict",
]
