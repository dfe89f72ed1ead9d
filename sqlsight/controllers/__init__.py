"""
Controllers (routes) organized by layer
"""
from sqlsight.controllers import analysis_controller
from sqlsight.controllers import queries_controller
from sqlsight.controllers import sql_controller

__all__ = [
    "analysis_controller",
    "queries_controller",
    "sql_controller",
]
