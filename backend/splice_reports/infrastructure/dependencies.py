"""FastAPI dependency injection: wires infrastructure to the application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from splice_reports.application.services import ReportService, ReportStatsService
from splice_reports.infrastructure.database.repositories import SQLAlchemyReportRepository
from splice_reports.infrastructure.database.session import get_db_session


async def get_report_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ReportService, None]:
    """Provides a ReportService instance with its repository wired up."""
    repository = SQLAlchemyReportRepository(session)
    yield ReportService(repository)


async def get_report_stats_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ReportStatsService, None]:
    """Provides a ReportStatsService reading through the same repository port."""
    repository = SQLAlchemyReportRepository(session)
    yield ReportStatsService(repository)
