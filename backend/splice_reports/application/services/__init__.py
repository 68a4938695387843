from .report_service import ReportService
from .report_stats_service import ReportStatsService

__all__ = [
    "ReportService",
    "ReportStatsService",
]
