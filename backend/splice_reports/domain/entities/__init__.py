from .report import CLOCK_FORMAT, ZONE_CODES, Report, format_clock_time
from .statistics import ReportCount, ReportStatistics

__all__ = [
    "CLOCK_FORMAT",
    "ZONE_CODES",
    "Report",
    "format_clock_time",
    "ReportCount",
    "ReportStatistics",
]
