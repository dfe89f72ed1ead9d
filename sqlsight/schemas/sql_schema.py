"""
SQL gateway schemas
"""
from pydantic import BaseModel
from typing import Optional
from sqlsight.dtos import ErrorKind


class SQLRequest(BaseModel):
    query: str
    dialect: Optional[str] = None


class ValidateSQLResponse(BaseModel):
    is_valid: bool
    sanitized_query: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None


class ExplainSQLResponse(BaseModel):
    explanation: str


class SuggestCorrectionRequest(BaseModel):
    query: str
    error: str  # Execution error message from the database


class SuggestCorrectionResponse(BaseModel):
    suggestion: str
