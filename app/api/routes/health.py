"""Health check endpoint for monitoring service status"""
from fastapi import APIRouter, Depends, status
from sqlalchemy import text
from sqlalchemy.orm import Session
from datetime import datetime, timezone
import logging

from app.core.dependencies import get_db

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=["health"])


@health_router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Check if the API and its database are reachable",
)
def health_check(db: Session = Depends(get_db)):
    """Health check including the catalog database"""
    database = "connected"
    try:
        db.execute(text("SELECT 1")).fetchone()
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        database = "disconnected"

    return {
        "status": "healthy" if database == "connected" else "degraded",
        "database": database,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "variation-engine",
    }
