from .report import (
    DayCountResponse,
    ErrorResponse,
    ReportCreate,
    ReportResponse,
    ReportStatsResponse,
    ReportUpdate,
    ZoneCountResponse,
    parse_create_payload,
    parse_update_payload,
)

__all__ = [
    "DayCountResponse",
    "ErrorResponse",
    "ReportCreate",
    "ReportResponse",
    "ReportStatsResponse",
    "ReportUpdate",
    "ZoneCountResponse",
    "parse_create_payload",
    "parse_update_payload",
]
