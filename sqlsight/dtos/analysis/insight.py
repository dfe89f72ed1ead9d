"""
Insight DTOs
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict


class InsightKind(str, Enum):
    SUMMARY = "summary"
    TREND = "trend"
    COMPARISON = "comparison"
    ANOMALY = "anomaly"
    RECOMMENDATION = "recommendation"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Insight(BaseModel):
    """One natural-language finding about a result set"""
    model_config = ConfigDict(frozen=True)

    type: InsightKind
    text: str
    confidence: Confidence
