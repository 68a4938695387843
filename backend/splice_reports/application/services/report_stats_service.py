"""Application service computing dashboard statistics from the report table."""

from splice_reports.application.interfaces import ReportRepository
from splice_reports.domain.entities import ZONE_CODES, Report, ReportCount, ReportStatistics


class ReportStatsService:
    """Aggregates counts, completion rate and per-day / per-zone series.

    Reads the full table on every call; there is no cache.
    """

    def __init__(self, repository: ReportRepository):
        self._repository = repository

    async def get_statistics(self) -> ReportStatistics:
        reports = await self._repository.get_all()
        return summarize(reports)


def summarize(reports: list[Report]) -> ReportStatistics:
    by_day: dict[str, ReportCount] = {}
    by_zone: dict[str, ReportCount] = {}
    completed = 0

    for report in reports:
        day = by_day.setdefault(report.date, ReportCount(key=report.date))
        zone = by_zone.setdefault(report.zone, ReportCount(key=report.zone))
        day.total += 1
        zone.total += 1
        if report.is_complete:
            completed += 1
            day.completed += 1
            zone.completed += 1

    # Known zones keep the form's order; free-text zones follow alphabetically.
    known = [by_zone[code] for code in ZONE_CODES if code in by_zone]
    other = sorted(
        (count for key, count in by_zone.items() if key not in ZONE_CODES),
        key=lambda count: count.key,
    )

    return ReportStatistics(
        total=len(reports),
        completed=completed,
        per_day=[by_day[key] for key in sorted(by_day)],
        per_zone=known + other,
    )
