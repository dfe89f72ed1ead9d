"""
SQL utilities (parsing, protection, explanation, execution)
"""
from sqlsight.pipeline.sql.parser import (
    ParsedStatement,
    SQLParseError,
    StatementKind,
    parse_sql,
)
from sqlsight.pipeline.sql.protector import FORBIDDEN_KEYWORDS, validate_and_sanitize
from sqlsight.pipeline.sql.explainer import explain_sql, suggest_correction
from sqlsight.pipeline.sql.executor import execute_readonly_on_conn, execute_statements_on_conn

__all__ = [
    "ParsedStatement",
    "SQLParseError",
    "StatementKind",
    "parse_sql",
    "FORBIDDEN_KEYWORDS",
    "validate_and_sanitize",
    "explain_sql",
    "suggest_correction",
    "execute_readonly_on_conn",
    "execute_statements_on_conn",
]
