from .base import Base
from .session import (
    async_session_factory,
    create_report_engine,
    create_session_factory,
    engine,
    get_db_session,
    to_async_url,
)
from .models import ReportModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "create_report_engine",
    "create_session_factory",
    "get_db_session",
    "to_async_url",
    "ReportModel",
]
