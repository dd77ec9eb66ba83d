"""
Health check endpoints.
"""

import logging
from typing import Dict, Any
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from datetime import datetime, timezone

from app.core.database import get_db, query

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    """
    return {
        "status": "healthy",
        "timestamp": _now()
    }


@router.get("/health/detailed", status_code=status.HTTP_200_OK)
def detailed_health_check(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Health check including database connectivity and row counts.
    """
    health_status: Dict[str, Any] = {
        "status": "healthy",
        "timestamp": _now(),
        "checks": {}
    }

    try:
        counts = query(
            db,
            """SELECT (SELECT COUNT(*) FROM companies) AS companies,
                      (SELECT COUNT(*) FROM jobs) AS jobs"""
        )[0]
        health_status["checks"]["database"] = {
            "status": "healthy",
            "message": "Database connection successful",
            "companies": counts["companies"],
            "jobs": counts["jobs"],
        }
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": f"Database error: {str(e)}"
        }

    return health_status
