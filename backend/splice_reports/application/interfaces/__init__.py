from .report_repository import ReportRepository

__all__ = [
    "ReportRepository",
]
