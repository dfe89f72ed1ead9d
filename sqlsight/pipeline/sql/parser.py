"""
SQL Parser Adapter
Turns raw SQL text into classified statement trees
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Optional, Tuple, Type

import sqlglot
from sqlglot import exp
from sqlglot.errors import SqlglotError

from sqlsight.core.config import resolve_dialect

logger = logging.getLogger(__name__)


class SQLParseError(Exception):
    """Raised when text is not valid SQL for the configured dialect"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StatementKind(str, Enum):
    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    DDL = "ddl"
    OTHER = "other"


@dataclass(frozen=True)
class ParsedStatement:
    """
    One parsed SQL statement

    The sqlglot expression is never mutated; callers derive SQL text
    (to_sql) or copies instead.
    """
    expression: exp.Expression
    dialect: str

    kind: ClassVar[StatementKind] = StatementKind.OTHER

    def to_sql(self) -> str:
        return self.expression.sql(dialect=self.dialect)


@dataclass(frozen=True)
class SelectStatement(ParsedStatement):
    kind: ClassVar[StatementKind] = StatementKind.SELECT


@dataclass(frozen=True)
class InsertStatement(ParsedStatement):
    kind: ClassVar[StatementKind] = StatementKind.INSERT


@dataclass(frozen=True)
class UpdateStatement(ParsedStatement):
    kind: ClassVar[StatementKind] = StatementKind.UPDATE


@dataclass(frozen=True)
class DeleteStatement(ParsedStatement):
    kind: ClassVar[StatementKind] = StatementKind.DELETE


@dataclass(frozen=True)
class DDLStatement(ParsedStatement):
    kind: ClassVar[StatementKind] = StatementKind.DDL


@dataclass(frozen=True)
class OtherStatement(ParsedStatement):
    kind: ClassVar[StatementKind] = StatementKind.OTHER


# Statement classification, first match wins
_STATEMENT_VARIANTS: Tuple[Tuple[Tuple[Type[exp.Expression], ...], Type[ParsedStatement]], ...] = (
    ((exp.Insert,), InsertStatement),
    ((exp.Update,), UpdateStatement),
    ((exp.Delete,), DeleteStatement),
    ((exp.Create, exp.Drop, exp.Alter, exp.TruncateTable), DDLStatement),
)

# Nodes that write or change schema wherever they appear in a tree
_MUTATING_NODES = (
    exp.Insert,
    exp.Update,
    exp.Delete,
    exp.Merge,
    exp.Create,
    exp.Drop,
    exp.Alter,
    exp.TruncateTable,
)

_SET_OPERATIONS = (exp.Union, exp.Intersect, exp.Except)

# Top-level nodes that are statements; a bare expression ("foo") is not SQL
_STATEMENT_NODES = (
    exp.Query,
    exp.Command,
    exp.Pragma,
    exp.Set,
    exp.Use,
    exp.Describe,
    exp.Transaction,
    exp.Commit,
    exp.Rollback,
) + _MUTATING_NODES


def parse_sql(text: str, dialect: Optional[str] = None) -> List[ParsedStatement]:
    """
    Parse SQL text into one classified statement per source statement

    Args:
        text: Raw SQL (may contain several ;-separated statements)
        dialect: Dialect name (defaults to settings.SQL_DIALECT)

    Returns:
        Statements in source order

    Raises:
        SQLParseError: text is not valid SQL for the dialect, or the
            dialect is unknown
    """
    read = resolve_dialect(dialect)

    try:
        sqlglot.Dialect.get_or_raise(read)
    except ValueError as e:
        logger.debug(f"[parse_sql] Unknown dialect: {read}")
        raise SQLParseError(str(e)) from e

    try:
        expressions = sqlglot.parse(text, read=read)
    except SqlglotError as e:
        logger.debug(f"[parse_sql] {read} parse failed: {e}")
        raise SQLParseError(str(e)) from e

    expressions = [expression for expression in expressions if expression is not None]
    if not expressions:
        raise SQLParseError("No SQL statement found")

    for expression in expressions:
        if not isinstance(expression, _STATEMENT_NODES):
            raise SQLParseError(f"Not a SQL statement: {expression.sql(dialect=read)}")

    statements = [classify(expression, read) for expression in expressions]

    logger.debug(f"[parse_sql] Parsed {len(statements)} statement(s): {[s.kind.value for s in statements]}")
    return statements


def classify(expression: exp.Expression, dialect: str) -> ParsedStatement:
    """Wrap a sqlglot expression in the statement variant matching its kind"""
    if _is_pure_read(expression) and not expression.find(*_MUTATING_NODES):
        return SelectStatement(expression, dialect)

    for node_types, variant in _STATEMENT_VARIANTS:
        if isinstance(expression, node_types):
            return variant(expression, dialect)

    return OtherStatement(expression, dialect)


def _is_pure_read(node: exp.Expression) -> bool:
    while isinstance(node, (exp.Subquery, exp.Paren)):
        node = node.this

    if isinstance(node, exp.Select):
        # SELECT ... INTO creates a table
        return node.args.get("into") is None

    if isinstance(node, _SET_OPERATIONS):
        return _is_pure_read(node.this) and _is_pure_read(node.expression)

    return False
