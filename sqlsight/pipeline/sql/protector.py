"""
SQL Protection
Validates and sanitizes SQL queries before execution
"""
import logging
from typing import Optional

from sqlsight.dtos.query import ErrorKind, ValidationVerdict
from sqlsight.pipeline.sql.parser import SQLParseError, StatementKind, parse_sql

logger = logging.getLogger(__name__)

# Write/DDL/admin keywords, matched as raw substrings (case-insensitive).
# Known over-approximation: identifiers or literals containing these words
# (e.g. "updated_at", 'DROP zone') are rejected too.
FORBIDDEN_KEYWORDS = (
    "DROP",
    "DELETE",
    "TRUNCATE",
    "INSERT",
    "UPDATE",
    "ALTER",
    "CREATE",
    "REPLACE",
    "GRANT",
    "REVOKE",
    "EXEC",
    "EXECUTE",
)


def find_forbidden_keyword(sql: str) -> Optional[str]:
    """Return the first forbidden keyword found anywhere in the text, if any"""
    upper_sql = sql.upper()
    for keyword in FORBIDDEN_KEYWORDS:
        if keyword in upper_sql:
            return keyword
    return None


def validate_and_sanitize(sql: str, dialect: Optional[str] = None) -> ValidationVerdict:
    """
    Validate and sanitize SQL query:
    - Reject empty input
    - Block write/DDL/admin keywords (pre-filter, before parsing)
    - Parse and require every statement to be a pure SELECT
    - Re-serialize the parsed tree(s) as the query to execute

    Args:
        sql: Untrusted SQL text
        dialect: Dialect to parse/serialize with (defaults to settings.SQL_DIALECT)

    Returns:
        ValidationVerdict (sanitized or rejected, never raises)
    """
    trimmed = (sql or "").strip()

    if not trimmed:
        logger.warning("SQL rejected: empty query")
        return ValidationVerdict.rejected(ErrorKind.EMPTY_QUERY, "Query cannot be empty")

    keyword = find_forbidden_keyword(trimmed)
    if keyword:
        logger.warning(f"SQL rejected: forbidden keyword {keyword}")
        return ValidationVerdict.rejected(
            ErrorKind.FORBIDDEN_OPERATION,
            f"Forbidden operation detected: {keyword}. Only SELECT queries are allowed.",
            keyword=keyword,
        )

    try:
        statements = parse_sql(trimmed, dialect=dialect)
    except SQLParseError as e:
        logger.warning(f"SQL rejected: parse error: {e.message}")
        return ValidationVerdict.rejected(ErrorKind.SYNTAX_ERROR, f"SQL parsing error: {e.message}")

    for statement in statements:
        if statement.kind is not StatementKind.SELECT:
            logger.warning(f"SQL rejected: {statement.kind.value} statement")
            return ValidationVerdict.rejected(
                ErrorKind.NON_SELECT_STATEMENT,
                "Only SELECT queries are allowed",
            )

    # Execute what was parsed and approved, not the original text
    canonical = [statement.to_sql() for statement in statements]
    sanitized = "; ".join(canonical)

    logger.info(f"SQL approved ({len(statements)} statement(s))")
    logger.debug(f"Sanitized SQL: {sanitized[:200]}")

    return ValidationVerdict.sanitized(sanitized, canonical)
