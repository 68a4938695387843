"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from splice_reports.config import get_settings
from splice_reports.application.services import ReportService
from splice_reports.infrastructure.database import Base, engine
from splice_reports.infrastructure.database.session import async_session_factory
from splice_reports.infrastructure.database.repositories import SQLAlchemyReportRepository
from splice_reports.infrastructure.logging.log_config import setup_logging
from splice_reports.presentation.api.exception_handlers import register_exception_handlers
from splice_reports.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)

DEMO_REPORTS: list[dict] = [
    {
        "zone": "SCT",
        "chainNo": "CH001",
        "splicingTeam": "Team 1",
        "name": "John Smith",
        "jobId": "JOB-001",
        "bjOrSite": "BJ-001",
        "routing": "Route-A",
        "date": "2025-12-15",
        "timeBegin": "09:15",
        "status": True,
        "effect": "Excellent connection quality",
    },
    {
        "zone": "CWT",
        "chainNo": "CH002",
        "splicingTeam": "Team 2",
        "name": "Jane Doe",
        "jobId": "JOB-002",
        "bjOrSite": "Site-B",
        "routing": "Route-B",
        "date": "2025-12-16",
        "timeBegin": "10:30",
        "status": True,
        "effect": "Minor adjustments needed",
    },
    {
        "zone": "TWA",
        "chainNo": "CH003",
        "splicingTeam": "Team 1",
        "name": "Mike Johnson",
        "jobId": "JOB-003",
        "bjOrSite": "BJ-003",
        "routing": "Route-C",
        "date": "2025-12-17",
        "timeBegin": "14:45",
        "status": False,
        "effect": "Pending review",
    },
]


async def _seed_demo_reports() -> None:
    """Insert the demo reports when the table is empty.

    Goes through the lifecycle service so seeded rows get the same defaults
    and validation as user-entered ones. Safe to call on every startup.
    """
    try:
        async with async_session_factory() as session:
            service = ReportService(SQLAlchemyReportRepository(session))
            existing = await service.list_reports()
            if existing:
                logger.debug("Report table already has %d rows; skipping seed", len(existing))
                return
            for payload in DEMO_REPORTS:
                await service.create_report(payload)
            await session.commit()
            logger.info("Seeded %d demo reports", len(DEMO_REPORTS))
    except Exception as exc:
        logger.warning("Could not seed demo reports: %s", exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: logging, tables and demo seed on startup; engine disposal on shutdown."""
    settings = get_settings()
    setup_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.seed_demo_data:
        await _seed_demo_reports()

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "splice_reports.main:app",
        host="0.0.0.0",
        port=5000,
        reload=True,
    )
