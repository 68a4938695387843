from .report_repository import SQLAlchemyReportRepository

__all__ = [
    "SQLAlchemyReportRepository",
]
