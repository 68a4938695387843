"""Domain entity: a splicing work report as a plain Python object."""

from dataclasses import dataclass
from datetime import datetime

# Zone codes offered by the data-entry form. Advisory only: any zone string
# is stored as given.
ZONE_CODES: tuple[str, ...] = ("SCT", "CWT", "TWA", "ONT", "CW", "CN", "ER", "NR", "NER", "SR")

CLOCK_FORMAT = "%H:%M"


def format_clock_time(moment: datetime) -> str:
    """Render a wall-clock time as 24-hour ``HH:MM``."""
    return moment.strftime(CLOCK_FORMAT)


@dataclass
class Report:
    """Core domain entity representing one unit of splicing work.

    ``id`` and ``created_at`` are assigned by the store on insert and never
    change afterwards.
    """

    zone: str
    chain_no: str
    splicing_team: str
    name: str
    job_id: str
    bj_or_site: str
    routing: str
    date: str
    time_begin: str
    effect: str
    status: bool = False
    time_finished: str | None = None
    gps_coordinates: str | None = None
    problem_details: str | None = None
    id: int | None = None
    created_at: datetime | None = None

    @property
    def is_complete(self) -> bool:
        return self.status

    @property
    def status_label(self) -> str:
        return "Complete" if self.status else "Not Complete"
