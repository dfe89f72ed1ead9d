"""
SQL validation DTOs
"""
from enum import Enum
from typing import Optional, Dict, Any, Sequence, Tuple
from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    """Why the SQL gateway refused a query"""
    EMPTY_QUERY = "empty_query"
    FORBIDDEN_OPERATION = "forbidden_operation"
    SYNTAX_ERROR = "syntax_error"
    NON_SELECT_STATEMENT = "non_select_statement"


class ValidationVerdict(BaseModel):
    """
    Result of the SQL safety gateway

    Either sanitized (is_valid=True, sanitized_query set) or
    rejected (is_valid=False, error_kind + error set)
    """
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    sanitized_query: Optional[str] = None
    statements: Tuple[str, ...] = ()  # Canonical statements, executed one by one
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None
    keyword: Optional[str] = None  # Only for FORBIDDEN_OPERATION

    @classmethod
    def sanitized(
        cls,
        canonical_query: str,
        statements: Optional[Sequence[str]] = None
    ) -> "ValidationVerdict":
        return cls(
            is_valid=True,
            sanitized_query=canonical_query,
            statements=tuple(statements) if statements else (canonical_query,),
        )

    @classmethod
    def rejected(
        cls,
        kind: ErrorKind,
        detail: str,
        keyword: Optional[str] = None
    ) -> "ValidationVerdict":
        return cls(is_valid=False, error_kind=kind, error=detail, keyword=keyword)

    def to_response(self) -> Dict[str, Any]:
        """Plain dict shape: {is_valid, sanitized_query?, error?}"""
        if self.is_valid:
            return {"is_valid": True, "sanitized_query": self.sanitized_query}
        return {"is_valid": False, "error": self.error}
