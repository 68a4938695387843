"""Abstract repository interface (port) for report persistence."""

from abc import ABC, abstractmethod
from typing import Any

from splice_reports.domain.entities import Report


class ReportRepository(ABC):
    """Port for report persistence, implemented in the infrastructure layer.

    Implementations must assign a previously unused ``id`` on insert and apply
    ``update_fields`` atomically: either every change is visible to other
    readers or none is.
    """

    @abstractmethod
    async def get_all(self) -> list[Report]:
        """Retrieve every report ordered by ascending ID."""
        ...

    @abstractmethod
    async def create(self, report: Report) -> Report:
        """Persist a new report and return it with the generated ID and creation time."""
        ...

    @abstractmethod
    async def update_fields(self, report_id: int, changes: dict[str, Any]) -> Report | None:
        """Apply a sparse change set in one step.

        Keys are entity attribute names; absent keys are left untouched.
        Returns the post-update report, or None if no report has this ID.
        An empty change set returns the current report unchanged.
        """
        ...

    @abstractmethod
    async def delete(self, report_id: int) -> bool:
        """Delete a report. Returns True if deleted, False if not found."""
        ...
