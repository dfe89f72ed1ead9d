"""
SQL explanation and correction tips
Best-effort helpers, they never raise
"""
import logging
import re
from typing import List, Optional

from sqlglot import exp

from sqlsight.pipeline.sql.parser import SQLParseError, StatementKind, parse_sql

logger = logging.getLogger(__name__)

EXPLANATION_FALLBACK = "Unable to parse query explanation."
NON_SELECT_EXPLANATION = "This query performs a non-SELECT operation."

# Execution error messages (SQLite, PostgreSQL, MySQL wording)
_SYNTAX_ERROR = re.compile(r"syntax error|error in your sql syntax", re.I)
_MISSING_TABLE = re.compile(r"no such table|relation .* does not exist|table .* doesn't exist|unknown table", re.I)
_MISSING_COLUMN = re.compile(r"no such column|unknown column|column .* does not exist", re.I)

_JOIN = re.compile(r"\bjoin\b", re.I)
_JOIN_CONDITION = re.compile(r"\b(on|using)\b", re.I)


def explain_sql(sql: str, dialect: Optional[str] = None) -> str:
    """
    Describe a query in one sentence built from its syntax tree

    Example:
        "SELECT name, COUNT(*) AS n FROM users WHERE active = 1 GROUP BY name LIMIT 5"
        -> "Selecting: name, COUNT(*) as n, from users, with filtering conditions,
            grouped by specific columns, limited to 5 rows."
    """
    try:
        statements = parse_sql(sql, dialect=dialect)
    except SQLParseError as e:
        logger.debug(f"Explanation unavailable: {e.message}")
        return EXPLANATION_FALLBACK

    statement = statements[0]
    if statement.kind is not StatementKind.SELECT:
        return NON_SELECT_EXPLANATION

    select = statement.expression.find(exp.Select)
    if select is None:
        return EXPLANATION_FALLBACK

    parts: List[str] = []

    columns = select.expressions
    if len(columns) == 1 and isinstance(columns[0], exp.Star):
        parts.append("Selecting all columns")
    elif columns:
        parts.append(f"Selecting: {', '.join(_describe_column(c, statement.dialect) for c in columns)}")

    tables = _source_tables(select)
    if tables:
        parts.append(f"from {', '.join(tables)}")

    if select.args.get("where"):
        parts.append("with filtering conditions")

    if select.args.get("group"):
        parts.append("grouped by specific columns")

    if select.args.get("order"):
        parts.append("sorted by specific columns")

    limit = select.args.get("limit")
    if limit:
        value = limit.args.get("expression") or limit.args.get("this")
        parts.append(f"limited to {value.sql() if value else 'unknown'} rows")

    if not parts:
        return EXPLANATION_FALLBACK

    return ", ".join(parts) + "."


def _describe_column(column: exp.Expression, dialect: str) -> str:
    inner = column.unalias()
    alias = column.alias

    if isinstance(inner, exp.Star) or (isinstance(inner, exp.Column) and isinstance(inner.this, exp.Star)):
        return "all columns"

    if isinstance(inner, exp.AggFunc):
        arg = inner.this
        if isinstance(arg, exp.Column):
            arg_text = arg.name
        elif arg is None or isinstance(arg, exp.Star):
            arg_text = "*"
        else:
            arg_text = arg.sql(dialect=dialect)
        described = f"{inner.key.upper()}({arg_text})"
        return f"{described} as {alias}" if alias else described

    return alias or inner.alias_or_name or "unknown"


def _source_tables(select: exp.Select) -> List[str]:
    """Tables read directly by this SELECT (FROM + JOIN), not by its subqueries"""
    names: List[str] = []
    for table in select.find_all(exp.Table):
        if table.find_ancestor(exp.Select) is not select:
            continue
        if table.name and table.name not in names:
            names.append(table.name)
    return names


def suggest_correction(sql: str, error: str) -> str:
    """
    Suggest fixes for a query that failed on the live database

    Pattern matching on the execution error message (and on the query
    for a JOIN without ON/USING). Advisory only.
    """
    suggestions: List[str] = []
    error = error or ""
    sql = sql or ""

    if _SYNTAX_ERROR.search(error):
        suggestions.append("Check for missing commas, parentheses, or quotes")

    if _MISSING_TABLE.search(error):
        suggestions.append("Verify the table name exists in the schema")
        suggestions.append("Use the schema tool to see available tables")

    if _MISSING_COLUMN.search(error):
        suggestions.append("Check if the column name is spelled correctly")
        suggestions.append("Use the schema tool to see available columns")

    if "ambiguous" in error.lower():
        suggestions.append("Use table aliases to disambiguate column names (e.g., t1.id, t2.id)")

    if _JOIN.search(sql) and not _JOIN_CONDITION.search(sql):
        suggestions.append("Add an ON clause to your JOIN statement")

    # Generic suggestions
    if not suggestions:
        suggestions.append("Review the SQL syntax")
        suggestions.append("Check table and column names against the schema")
        suggestions.append("Ensure proper use of quotes for string literals")

    return ". ".join(suggestions) + "."
