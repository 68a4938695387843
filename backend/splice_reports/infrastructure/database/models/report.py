"""SQLAlchemy ORM model for the Report entity."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from splice_reports.infrastructure.database.base import Base


class ReportModel(Base):
    """ORM model mapped to the 'splicing_reports' table."""

    __tablename__ = "splicing_reports"
    # AUTOINCREMENT keeps SQLite from handing out the ID of a deleted last row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    zone: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    chain_no: Mapped[str] = mapped_column(Text, nullable=False)
    splicing_team: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    job_id: Mapped[str] = mapped_column(Text, nullable=False)
    bj_or_site: Mapped[str] = mapped_column(Text, nullable=False)
    routing: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    gps_coordinates: Mapped[str | None] = mapped_column(Text, nullable=True)
    time_begin: Mapped[str] = mapped_column(String(32), nullable=False)
    time_finished: Mapped[str | None] = mapped_column(String(32), nullable=True)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    effect: Mapped[str] = mapped_column(Text, nullable=False)
    problem_details: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<ReportModel(id={self.id}, job_id='{self.job_id}', status={self.status})>"
