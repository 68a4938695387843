"""Pydantic DTOs (Data Transfer Objects) for the splicing Report feature.

Wire names are camelCase (``chainNo``, ``timeBegin`` ...); Python attribute
names are snake_case. Payload models are strict: a string field only accepts
a string and ``status`` only accepts a JSON boolean. Unknown keys are ignored.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from splice_reports.domain.entities import ReportStatistics
from splice_reports.domain.exceptions import ValidationError

_PAYLOAD_CONFIG = ConfigDict(alias_generator=to_camel, strict=True, extra="ignore")


class ReportCreate(BaseModel):
    """Schema for creating a new report.

    Field order is the order in which violations are detected; only the
    first one is reported.
    """

    model_config = _PAYLOAD_CONFIG

    zone: str = Field(..., min_length=1, examples=["SCT"])
    chain_no: str = Field(..., min_length=1, examples=["CH001"])
    splicing_team: str = Field(..., min_length=1, examples=["Team 1"])
    name: str = Field(..., min_length=1, examples=["John Smith"])
    job_id: str = Field(..., min_length=1, examples=["JOB-001"])
    bj_or_site: str = Field(..., min_length=1, examples=["BJ-001"])
    routing: str = Field(..., min_length=1, examples=["Route-A"])
    date: str = Field(..., min_length=1, examples=["2025-12-15"])
    effect: str = Field(..., examples=["Excellent connection quality"])
    status: bool = False
    time_begin: str | None = Field(None, examples=["09:15"])
    time_finished: str | None = None
    gps_coordinates: str | None = Field(None, examples=["13.7563, 100.5018"])
    problem_details: str | None = None


class ReportUpdate(BaseModel):
    """Schema for a partial update. Every field is optional (merge-patch).

    ``null`` clears the optional text fields; it is rejected for fields a
    report must always carry.
    """

    model_config = _PAYLOAD_CONFIG

    zone: str | None = Field(None, min_length=1)
    chain_no: str | None = Field(None, min_length=1)
    splicing_team: str | None = Field(None, min_length=1)
    name: str | None = Field(None, min_length=1)
    job_id: str | None = Field(None, min_length=1)
    bj_or_site: str | None = Field(None, min_length=1)
    routing: str | None = Field(None, min_length=1)
    date: str | None = Field(None, min_length=1)
    effect: str | None = None
    status: bool | None = None
    time_begin: str | None = None
    time_finished: str | None = None
    gps_coordinates: str | None = None
    problem_details: str | None = None

    @field_validator(
        "zone",
        "chain_no",
        "splicing_team",
        "name",
        "job_id",
        "bj_or_site",
        "routing",
        "date",
        "effect",
        "status",
        "time_begin",
        mode="before",
    )
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise PydanticCustomError("null_not_allowed", "Value may not be null")
        return value

    def changes(self) -> dict[str, Any]:
        """Sparse change set keyed by attribute name, holding only fields present in the request."""
        return self.model_dump(exclude_unset=True)


class ReportResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    zone: str
    chain_no: str
    splicing_team: str
    name: str
    job_id: str
    bj_or_site: str
    routing: str
    date: str
    gps_coordinates: str | None
    time_begin: str
    time_finished: str | None
    status: bool
    effect: str
    problem_details: str | None
    created_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DayCountResponse(BaseModel):
    date: str
    total: int
    completed: int


class ZoneCountResponse(BaseModel):
    zone: str
    total: int
    completed: int


class ReportStatsResponse(BaseModel):
    """Dashboard KPIs and chart series."""

    total: int
    completed: int
    pending: int
    completion_rate: float
    per_day: list[DayCountResponse]
    per_zone: list[ZoneCountResponse]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_statistics(cls, stats: ReportStatistics) -> "ReportStatsResponse":
        return cls(
            total=stats.total,
            completed=stats.completed,
            pending=stats.pending,
            completion_rate=stats.completion_rate,
            per_day=[
                DayCountResponse(date=c.key, total=c.total, completed=c.completed)
                for c in stats.per_day
            ],
            per_zone=[
                ZoneCountResponse(zone=c.key, total=c.total, completed=c.completed)
                for c in stats.per_zone
            ],
        )


class ErrorResponse(BaseModel):
    """Error body for 4xx/5xx responses. ``field`` is set for validation failures only."""

    message: str
    field: str | None = None


# ── Validation entry points ──────────────────────────────────────────

_MESSAGES: dict[str, str] = {
    "missing": "{field} is required",
    "string_too_short": "{field} must not be empty",
    "string_type": "{field} must be a string",
    "bool_type": "{field} must be a boolean",
    "null_not_allowed": "{field} cannot be null",
}


def _first_violation(exc: PydanticValidationError) -> ValidationError:
    """Collapse a pydantic error list into the first violation only."""
    error = exc.errors()[0]
    loc = error.get("loc", ())
    if not loc:
        return ValidationError("Request body must be a JSON object", field=None)

    field = ".".join(str(part) for part in loc)
    template = _MESSAGES.get(error["type"])
    message = template.format(field=field) if template else error["msg"]
    return ValidationError(message, field=field)


def parse_create_payload(payload: Any) -> ReportCreate:
    """Validate a raw creation payload; raises the domain ValidationError on the first violation."""
    if isinstance(payload, ReportCreate):
        return payload
    try:
        return ReportCreate.model_validate(payload)
    except PydanticValidationError as exc:
        raise _first_violation(exc) from exc


def parse_update_payload(payload: Any) -> ReportUpdate:
    """Validate a raw partial-update payload; ``None`` is treated as an empty change set."""
    if isinstance(payload, ReportUpdate):
        return payload
    if payload is None:
        payload = {}
    try:
        return ReportUpdate.model_validate(payload)
    except PydanticValidationError as exc:
        raise _first_violation(exc) from exc
