"""Splicing report endpoints.

Request bodies are taken raw and validated by the lifecycle service, so a
bad payload surfaces as a ``{message, field}`` 400 from the domain
ValidationError rather than FastAPI's default 422.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from splice_reports.application.schemas import ErrorResponse, ReportResponse, ReportStatsResponse
from splice_reports.application.services import ReportService, ReportStatsService
from splice_reports.infrastructure.dependencies import get_report_service, get_report_stats_service

router = APIRouter(prefix="/reports", tags=["Reports"])

_VALIDATION_ERROR = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("", response_model=list[ReportResponse])
async def list_reports(
    service: ReportService = Depends(get_report_service),
) -> list[ReportResponse]:
    """Retrieve every report, oldest first."""
    reports = await service.list_reports()
    return [ReportResponse.model_validate(r, from_attributes=True) for r in reports]


@router.get("/stats", response_model=ReportStatsResponse)
async def get_report_stats(
    service: ReportStatsService = Depends(get_report_stats_service),
) -> ReportStatsResponse:
    """Counts, completion rate and per-day / per-zone series for the dashboard."""
    stats = await service.get_statistics()
    return ReportStatsResponse.from_statistics(stats)


@router.post(
    "",
    response_model=ReportResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_VALIDATION_ERROR,
)
async def create_report(
    payload: Any = Body(None),
    service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    """Create a new report; begin time defaults to now, status to not complete."""
    report = await service.create_report(payload)
    return ReportResponse.model_validate(report, from_attributes=True)


@router.patch(
    "/{report_id}/complete",
    response_model=ReportResponse,
    responses=_NOT_FOUND,
)
async def complete_report(
    report_id: int,
    service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    """Mark a report complete and stamp its finish time."""
    report = await service.complete_report(report_id)
    return ReportResponse.model_validate(report, from_attributes=True)


@router.patch(
    "/{report_id}",
    response_model=ReportResponse,
    responses={**_VALIDATION_ERROR, **_NOT_FOUND},
)
async def update_report(
    report_id: int,
    payload: Any = Body(None),
    service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    """Apply only the fields present in the body to an existing report."""
    report = await service.update_report(report_id, payload)
    return ReportResponse.model_validate(report, from_attributes=True)


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_report(
    report_id: int,
    service: ReportService = Depends(get_report_service),
) -> Response:
    """Delete a report by ID. Unknown IDs are accepted silently."""
    await service.delete_report(report_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
