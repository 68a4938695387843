"""Top-level API router. Every endpoint lives under ``/api``."""

from fastapi import APIRouter

from splice_reports.presentation.api.endpoints.health import router as health_router
from splice_reports.presentation.api.endpoints.reports import router as reports_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(reports_router)
