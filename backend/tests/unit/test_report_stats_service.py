"""Unit tests for dashboard statistics."""

import pytest

from splice_reports.application.services import ReportService, ReportStatsService


@pytest.mark.asyncio
async def test_statistics_for_empty_table(stats_service: ReportStatsService):
    stats = await stats_service.get_statistics()
    assert stats.total == 0
    assert stats.pending == 0
    assert stats.completion_rate == 0.0
    assert stats.per_day == []
    assert stats.per_zone == []


@pytest.mark.asyncio
async def test_statistics_counts_and_series(
    service: ReportService, stats_service: ReportStatsService, report_payload
):
    await service.create_report({**report_payload, "zone": "TWA", "date": "2025-12-17"})
    await service.create_report({**report_payload, "zone": "SCT", "date": "2025-12-15", "status": True})
    await service.create_report({**report_payload, "zone": "Depot", "date": "2025-12-15"})
    await service.create_report({**report_payload, "zone": "SCT", "date": "2025-12-16"})
    await service.complete_report(4)

    stats = await stats_service.get_statistics()

    assert stats.total == 4
    assert stats.completed == 2
    assert stats.pending == 2
    assert stats.completion_rate == 50.0
    assert [(c.key, c.total, c.completed) for c in stats.per_day] == [
        ("2025-12-15", 2, 1),
        ("2025-12-16", 1, 1),
        ("2025-12-17", 1, 0),
    ]
    # Known zones first in form order, then free-text zones.
    assert [(c.key, c.total, c.completed) for c in stats.per_zone] == [
        ("SCT", 2, 2),
        ("TWA", 1, 0),
        ("Depot", 1, 0),
    ]


@pytest.mark.asyncio
async def test_completion_rate_rounds_to_one_decimal(
    service: ReportService, stats_service: ReportStatsService, report_payload
):
    for _ in range(3):
        await service.create_report(report_payload)
    await service.complete_report(1)

    stats = await stats_service.get_statistics()
    assert stats.completion_rate == 33.3
