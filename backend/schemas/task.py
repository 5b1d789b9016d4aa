"""Pydantic schemas for tasks."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.models.task import TaskStatus
from backend.schemas.employee import EmployeeId
from backend.utils.date_utils import from_storage


class TaskCreate(BaseModel):
    """Schema for creating a task."""

    title: str = Field(..., min_length=1, max_length=255, description="Task title")
    status: TaskStatus = Field(TaskStatus.PENDING, description="pending, in_progress or done")
    category: str | None = Field(None, max_length=255, description="Free-text category")
    detail: str | None = Field(None, description="Free-text description")
    due: datetime = Field(
        ...,
        description="Due timestamp; values without an offset use the server time zone",
    )
    employee_id: EmployeeId = Field(..., description="Owner of the task")


class TaskUpdate(BaseModel):
    """Schema for updating a task; only fields that are sent are applied."""

    title: str | None = Field(None, min_length=1, max_length=255)
    status: TaskStatus | None = None
    category: str | None = Field(None, max_length=255)
    detail: str | None = None
    due: datetime | None = None
    employee_id: EmployeeId | None = None


class TaskFilters(BaseModel):
    """Equality filters for team task listings."""

    category: str | None = None
    status: TaskStatus | None = None
    employee_id: EmployeeId | None = None


class TaskResponse(BaseModel):
    """Task summary returned from API."""

    id: int
    title: str
    status: TaskStatus
    category: str | None = None
    detail: str | None = None
    due: datetime
    employee_id: int

    model_config = ConfigDict(from_attributes=True)

    @field_validator("due", mode="before")
    @classmethod
    def attach_utc(cls, value: datetime) -> datetime:
        """Stored timestamps are naive UTC; expose them with an explicit offset."""
        if isinstance(value, datetime):
            return from_storage(value)
        return value


__all__ = ["TaskCreate", "TaskUpdate", "TaskFilters", "TaskResponse"]
