"""Concrete repository implementation for Report backed by SQLAlchemy."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from splice_reports.application.interfaces import ReportRepository
from splice_reports.domain.entities import Report
from splice_reports.infrastructure.database.models import ReportModel

# Widest key a 64-bit INTEGER column can hold; no stored report has an ID outside it.
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _storable_id(report_id: int) -> bool:
    return _MIN_ID <= report_id <= _MAX_ID


def _as_utc(value: datetime) -> datetime:
    """SQLite drops the offset of a stored timestamp; values are always written in UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyReportRepository(ReportRepository):
    """Implements the ReportRepository port using SQLAlchemy async sessions.

    Updates and deletes are single statements keyed on the primary key, so
    the database serializes concurrent writers to the same row.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ReportModel) -> Report:
        """Map ORM model → domain entity."""
        return Report(
            id=model.id,
            zone=model.zone,
            chain_no=model.chain_no,
            splicing_team=model.splicing_team,
            name=model.name,
            job_id=model.job_id,
            bj_or_site=model.bj_or_site,
            routing=model.routing,
            date=model.date,
            gps_coordinates=model.gps_coordinates,
            time_begin=model.time_begin,
            time_finished=model.time_finished,
            status=model.status,
            effect=model.effect,
            problem_details=model.problem_details,
            created_at=_as_utc(model.created_at),
        )

    def _to_model(self, entity: Report) -> ReportModel:
        """Map domain entity → ORM model (for creation). ID and created_at come from the store."""
        return ReportModel(
            zone=entity.zone,
            chain_no=entity.chain_no,
            splicing_team=entity.splicing_team,
            name=entity.name,
            job_id=entity.job_id,
            bj_or_site=entity.bj_or_site,
            routing=entity.routing,
            date=entity.date,
            gps_coordinates=entity.gps_coordinates,
            time_begin=entity.time_begin,
            time_finished=entity.time_finished,
            status=entity.status,
            effect=entity.effect,
            problem_details=entity.problem_details,
        )

    async def get_all(self) -> list[Report]:
        stmt = select(ReportModel).order_by(ReportModel.id.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, report: Report) -> Report:
        model = self._to_model(report)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update_fields(self, report_id: int, changes: dict[str, Any]) -> Report | None:
        if not _storable_id(report_id):
            return None
        if not changes:
            model = await self._session.get(ReportModel, report_id)
            return self._to_entity(model) if model else None

        stmt = (
            update(ReportModel)
            .where(ReportModel.id == report_id)
            .values(**changes)
            .returning(ReportModel)
            .execution_options(synchronize_session=False, populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def delete(self, report_id: int) -> bool:
        if not _storable_id(report_id):
            return False
        stmt = (
            delete(ReportModel)
            .where(ReportModel.id == report_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0
