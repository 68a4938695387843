"""Aggregate views over the report table used by the dashboard charts."""

from dataclasses import dataclass, field


@dataclass
class ReportCount:
    """Total and completed report counts for one bucket (a day or a zone)."""

    key: str
    total: int = 0
    completed: int = 0


@dataclass
class ReportStatistics:
    """Dashboard KPIs: overall counts, completion rate, per-day and per-zone buckets."""

    total: int = 0
    completed: int = 0
    per_day: list[ReportCount] = field(default_factory=list)
    per_zone: list[ReportCount] = field(default_factory=list)

    @property
    def pending(self) -> int:
        return self.total - self.completed

    @property
    def completion_rate(self) -> float:
        """Completed share as a percentage rounded to one decimal place."""
        if self.total == 0:
            return 0.0
        return round(self.completed * 100 / self.total, 1)
