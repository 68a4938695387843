"""Liveness and store-reachability check."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from splice_reports.config import get_settings
from splice_reports.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_db_session)) -> JSONResponse:
    """Report the API version and whether the report store answers a trivial query.

    503 with ``database: "unavailable"`` when the store cannot be reached.
    """
    settings = get_settings()
    try:
        await session.execute(text("SELECT 1"))
        database, healthy = "ok", True
    except SQLAlchemyError as exc:
        logger.warning("Health check could not reach the report store: %s", exc)
        database, healthy = "unavailable", False

    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if healthy else "degraded",
            "database": database,
            "version": settings.app_version,
            "environment": settings.app_env,
        },
    )
