"""
Chart recommendation DTOs
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ChartKind(str, Enum):
    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    AREA = "area"
    TABLE = "table"


class ChartRecommendation(BaseModel):
    """
    Recommended visualization for a result set

    Serialized as {type, reason, xAxis?, yAxis?} for the UI
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: ChartKind
    reason: str
    x_axis: Optional[str] = Field(default=None, alias="xAxis")
    y_axis: Optional[str] = Field(default=None, alias="yAxis")
