import logging
from fastapi import FastAPI

from sqlsight.core.config import settings
from sqlsight.controllers import (
    analysis_controller,
    queries_controller,
    sql_controller,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(title=settings.APP_TITLE)

# Include routers
app.include_router(sql_controller.router)
app.include_router(analysis_controller.router)
app.include_router(queries_controller.router)


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "SQL Insight Gateway API",
        "docs": "/docs",
        "dialect": settings.SQL_DIALECT,
    }


@app.get("/health")
def health():
    return {"status": "ok"}
