"""Shared fakes and fixtures for the report tests."""

from collections.abc import AsyncIterator
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from splice_reports.application.interfaces import ReportRepository
from splice_reports.application.services import ReportService, ReportStatsService
from splice_reports.domain.entities import Report
from splice_reports.infrastructure.database import (
    Base,
    create_report_engine,
    create_session_factory,
    get_db_session,
)
from splice_reports.main import app


# ── Fakes ────────────────────────────────────────────────────────────


class FakeReportRepository(ReportRepository):
    """In-memory fake repository. Hands out copies so callers cannot mutate stored rows."""

    def __init__(self):
        self._reports: dict[int, Report] = {}
        self._next_id = 1

    async def get_all(self) -> list[Report]:
        return [replace(self._reports[key]) for key in sorted(self._reports)]

    async def create(self, report: Report) -> Report:
        stored = replace(report, id=self._next_id, created_at=datetime.now(timezone.utc))
        self._next_id += 1
        self._reports[stored.id] = stored
        return replace(stored)

    async def update_fields(self, report_id: int, changes: dict[str, Any]) -> Report | None:
        current = self._reports.get(report_id)
        if current is None:
            return None
        updated = replace(current, **changes)
        self._reports[report_id] = updated
        return replace(updated)

    async def delete(self, report_id: int) -> bool:
        return self._reports.pop(report_id, None) is not None


class FakeClock:
    """Controllable wall clock."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture
def fake_repository() -> FakeReportRepository:
    return FakeReportRepository()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 12, 15, 8, 30))


@pytest.fixture
def service(fake_repository: FakeReportRepository, clock: FakeClock) -> ReportService:
    return ReportService(fake_repository, clock=clock)


@pytest.fixture
def stats_service(fake_repository: FakeReportRepository) -> ReportStatsService:
    return ReportStatsService(fake_repository)


@pytest.fixture
def report_payload() -> dict[str, Any]:
    """A complete, valid creation payload in wire (camelCase) form."""
    return {
        "zone": "SCT",
        "chainNo": "CH001",
        "splicingTeam": "Team 1",
        "name": "John Smith",
        "jobId": "JOB-001",
        "bjOrSite": "BJ-001",
        "routing": "Route-A",
        "date": "2025-12-15",
        "effect": "Excellent connection quality",
    }


@pytest_asyncio.fixture
async def sqlite_engine() -> AsyncIterator[AsyncEngine]:
    """A fresh in-memory SQLite store with the schema created."""
    engine = create_report_engine("sqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(sqlite_engine)


@pytest.fixture
def sqlite_app(session_factory: async_sessionmaker[AsyncSession]):
    """The app with every request session drawn from the in-memory store."""

    async def _session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _session
    try:
        yield app
    finally:
        app.dependency_overrides.clear()
