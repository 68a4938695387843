"""Async engine and session factory for the report store.

The configured ``database_url`` may be written with a plain driver name
(``sqlite:///...``, ``postgresql://...``); it is moved onto the matching
async driver before the engine is built.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from splice_reports.config import get_settings

_ASYNC_DRIVERS = {
    "sqlite://": "sqlite+aiosqlite://",
    "postgresql://": "postgresql+asyncpg://",
    "postgres://": "postgresql+asyncpg://",
}


def to_async_url(url: str) -> str:
    """Rewrite a plain SQLite/PostgreSQL URL to use aiosqlite/asyncpg. Other URLs pass through."""
    for prefix, async_prefix in _ASYNC_DRIVERS.items():
        if url.startswith(prefix):
            return async_prefix + url[len(prefix):]
    return url


def create_report_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Build the async engine for ``url``.

    An in-memory SQLite database lives only as long as its connection, so it
    gets a single shared connection (``StaticPool``) instead of a pool.
    """
    async_url = to_async_url(url)
    parsed = make_url(async_url)
    if parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:"):
        return create_async_engine(async_url, echo=echo, poolclass=StaticPool)
    return create_async_engine(async_url, echo=echo)


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Entities are mapped out of the session before commit; nothing reads expired rows.
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


settings = get_settings()
engine = create_report_engine(settings.database_url, echo=settings.database_echo)
async_session_factory = create_session_factory(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session, and one transaction, per request.

    Commits when the endpoint returns normally; any exception rolls back and
    propagates to the exception handlers.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
