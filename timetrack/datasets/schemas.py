"""
TIMETRACK - Dataset Schemas

Pydantic models for the hierarchical dataset supplied by the sync/import
collaborator. Field names are camelCase on the wire; snake_case is accepted.

Validation here is the only place malformed hours are rejected; the engine
downstream assumes non-negative finite numbers.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from timetrack.tasks.models import Group, Project, Task


def _date_from_epoch_ms(value: float) -> Optional[date]:
    try:
        return datetime.fromtimestamp(value / 1000).date()
    except (OverflowError, OSError, ValueError):
        return None


def _local_date(value: datetime) -> date:
    # Aware datetimes name an instant; the calendar day is the server's local one
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.date()


def _date_from_text(text: str) -> Optional[date]:
    try:
        return _local_date(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass
    try:
        # ISO basic form (20250115), not accepted by fromisoformat before 3.11
        return datetime.strptime(text, "%Y%m%d").date()
    except ValueError:
        return None


def coerce_date(value: Any) -> Optional[date]:
    """
    Parse a loosely typed date into a local calendar date.

    Accepts date/datetime objects, ISO strings and epoch milliseconds.
    Instants (epoch milliseconds, offset-aware datetimes) land on the
    server's local day whichever way they are encoded.
    Anything unparseable is treated as absent.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return _local_date(value)
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        return _date_from_epoch_ms(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        digits = text.lstrip("-")
        if digits.isdigit() and len(digits) > 8:
            return _date_from_epoch_ms(int(text))
        return _date_from_text(text)
    return None


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimeEntryPayload(_CamelModel):
    """Hours logged on one calendar date."""

    day: date = Field(alias="date")
    hours: float = Field(ge=0, allow_inf_nan=False)

    @field_validator("day", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> Any:
        parsed = coerce_date(value)
        return parsed if parsed is not None else value


class TaskPayload(_CamelModel):
    """Task as received from ingestion, with nested subtasks."""

    id: str = Field(min_length=1)
    name: str = ""
    status: Optional[str] = None
    priority: Optional[str] = None
    assignee: Optional[str] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    time_estimate: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    time_logged: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    additional_time: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    remaining: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    tags: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    subtasks: List["TaskPayload"] = Field(default_factory=list)
    time_entries: List[TimeEntryPayload] = Field(default_factory=list)

    @field_validator("start_date", "due_date", mode="before")
    @classmethod
    def _parse_dates(cls, value: Any) -> Optional[date]:
        return coerce_date(value)

    @field_validator("time_estimate", "time_logged", mode="before")
    @classmethod
    def _default_hours(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    @field_validator("priority", mode="before")
    @classmethod
    def _parse_priority(cls, value: Any) -> Optional[str]:
        # ClickUp sends {"priority": "urgent", "id": "1"}
        if isinstance(value, dict):
            value = value.get("priority") or value.get("name")
        if value is None:
            return None
        return str(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _parse_tags(cls, value: Any) -> List[str]:
        if not value:
            return []
        names = []
        for tag in value:
            name = tag.get("name") if isinstance(tag, dict) else tag
            if isinstance(name, str) and name.strip():
                names.append(name.strip())
        return names

    def to_model(self, is_subtask: bool = False) -> Task:
        """Build the engine's immutable Task tree."""
        entries: Dict[date, float] = {}
        for entry in self.time_entries:
            entries[entry.day] = entries.get(entry.day, 0.0) + entry.hours

        return Task(
            id=self.id,
            name=self.name,
            status=self.status,
            priority=self.priority,
            assignee=self.assignee,
            start_date=self.start_date,
            due_date=self.due_date,
            time_estimate=self.time_estimate,
            time_logged=self.time_logged,
            additional_time=self.additional_time,
            remaining=self.remaining,
            tags=list(self.tags),
            description=self.description,
            subtasks=[sub.to_model(is_subtask=True) for sub in self.subtasks],
            is_subtask=is_subtask,
            time_entries=entries,
        )


class ProjectPayload(_CamelModel):
    name: str = ""
    tasks: List[TaskPayload] = Field(default_factory=list)

    def to_model(self) -> Project:
        return Project(name=self.name, tasks=[task.to_model() for task in self.tasks])


class GroupPayload(_CamelModel):
    assignee: str = ""
    projects: List[ProjectPayload] = Field(default_factory=list)

    def to_model(self) -> Group:
        return Group(assignee=self.assignee, projects=[project.to_model() for project in self.projects])


class DatasetSummary(BaseModel):
    """Response model describing the loaded snapshot."""

    version: int = Field(description="Snapshot version, bumped on every load")
    group_count: int = Field(description="Number of member groups")
    project_count: int = Field(description="Number of projects across all groups")
    task_count: int = Field(description="Number of tasks including subtasks")
    loaded_at: Optional[datetime] = Field(default=None, description="When the snapshot was loaded")
