# api/routes/health.py
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from api.dependencies import get_database
from core.sa.database import Database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health(database: Database = Depends(get_database)):
    """Liveness plus a database ping"""
    body = {
        "status": "ok",
        "checks": {"database": "ok"},
        "timestamp": datetime.now(timezone.utc).astimezone().isoformat(timespec="seconds"),
    }
    try:
        database.ping()
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        body["status"] = "unhealthy"
        body["checks"]["database"] = "down"
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)

    return JSONResponse(status_code=status.HTTP_200_OK, content=body)
