from .report import ReportModel

__all__ = [
    "ReportModel",
]
