"""Pydantic schemas for API requests and responses."""

from backend.schemas.auth import LoginRequest, TokenResponse
from backend.schemas.employee import EmployeeCreate, EmployeeSummary
from backend.schemas.task import TaskCreate, TaskFilters, TaskResponse, TaskUpdate
from backend.schemas.team import (
    MembershipMode,
    TeamCreate,
    TeamMembersUpdate,
    TeamResponse,
    TeamUpdate,
)

__all__ = [
    "LoginRequest",
    "TokenResponse",
    "EmployeeCreate",
    "EmployeeSummary",
    "TaskCreate",
    "TaskFilters",
    "TaskResponse",
    "TaskUpdate",
    "MembershipMode",
    "TeamCreate",
    "TeamMembersUpdate",
    "TeamResponse",
    "TeamUpdate",
]
