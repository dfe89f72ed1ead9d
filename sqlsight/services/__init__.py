"""
Service layer for business logic
"""
from sqlsight.services.enrichment_service import EnrichmentService
from sqlsight.services.query_service import QueryService

__all__ = [
    "EnrichmentService",
    "QueryService",
]
