"""Application service (use case) for the report lifecycle.

Owns the rules applied before anything reaches the store: payload
validation, default-value derivation (``time_begin``, ``status``) and the
completion transition. Holds no state between calls.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from splice_reports.application.interfaces import ReportRepository
from splice_reports.application.schemas import parse_create_payload, parse_update_payload
from splice_reports.domain.entities import Report, format_clock_time
from splice_reports.domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class ReportService:
    """Orchestrates report business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ReportRepository, clock: Clock = datetime.now):
        self._repository = repository
        self._clock = clock

    def _now_hhmm(self) -> str:
        return format_clock_time(self._clock())

    async def list_reports(self) -> list[Report]:
        return await self._repository.get_all()

    async def create_report(self, payload: Any) -> Report:
        """Validate a creation payload and insert the report.

        ``time_begin`` falls back to the current local time when absent or
        empty; a supplied value is stored verbatim. ``status`` defaults to
        not complete.
        """
        data = parse_create_payload(payload)
        report = Report(
            zone=data.zone,
            chain_no=data.chain_no,
            splicing_team=data.splicing_team,
            name=data.name,
            job_id=data.job_id,
            bj_or_site=data.bj_or_site,
            routing=data.routing,
            date=data.date,
            time_begin=data.time_begin or self._now_hhmm(),
            effect=data.effect,
            status=data.status,
            time_finished=data.time_finished,
            gps_coordinates=data.gps_coordinates,
            problem_details=data.problem_details,
        )
        created = await self._repository.create(report)
        logger.info(
            "Created report %s (zone=%s, job=%s, status=%s)",
            created.id, created.zone, created.job_id, created.status_label,
        )
        return created

    async def update_report(self, report_id: int, payload: Any) -> Report:
        """Merge-patch the fields present in ``payload`` onto an existing report."""
        changes = parse_update_payload(payload).changes()
        return await self._apply(report_id, changes)

    async def complete_report(self, report_id: int) -> Report:
        """Mark a report complete and stamp the finish time with the current local time.

        Repeating the call keeps the report complete but re-stamps
        ``time_finished``.
        """
        return await self._apply(
            report_id,
            {"status": True, "time_finished": self._now_hhmm()},
        )

    async def delete_report(self, report_id: int) -> None:
        """Remove a report permanently. Deleting an unknown ID is a no-op."""
        deleted = await self._repository.delete(report_id)
        if deleted:
            logger.info("Deleted report %s", report_id)
        else:
            logger.debug("Delete ignored: report %s does not exist", report_id)

    async def _apply(self, report_id: int, changes: dict[str, Any]) -> Report:
        # Not-found comes from the update itself, never from a separate lookup.
        report = await self._repository.update_fields(report_id, changes)
        if report is None:
            raise NotFoundError("Report", report_id)
        if changes:
            logger.info("Updated report %s: %s", report_id, ", ".join(sorted(changes)))
        return report
