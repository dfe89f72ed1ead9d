"""
Column type DTOs
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict


class ColumnKind(str, Enum):
    NUMERIC = "numeric"
    DATE = "date"
    BOOLEAN = "boolean"
    CATEGORICAL = "categorical"
    UNKNOWN = "unknown"


class ColumnTypeInfo(BaseModel):
    """Inferred kind of one result column"""
    model_config = ConfigDict(frozen=True)

    name: str
    kind: ColumnKind
