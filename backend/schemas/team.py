"""Pydantic schemas for Team model and roster updates."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from backend.schemas.employee import EmployeeId, EmployeeSummary


class MembershipMode(str, Enum):
    """How a roster update combines with existing members."""

    ADDITIVE = "additive"  # keep current members, add new ones
    REPLACE = "replace"  # final roster is exactly the given ids


class TeamCreate(BaseModel):
    """Schema for creating a new team."""

    name: str = Field(..., max_length=255, description="Team name")


class TeamUpdate(BaseModel):
    """Schema for renaming a team."""

    name: str = Field(..., max_length=255)


class TeamMembersUpdate(BaseModel):
    """Payload for PATCH /teams/management/{team_id}."""

    employees: list[EmployeeId] | None = Field(None, description="Employee ids to apply")
    mode: MembershipMode | None = Field(
        None,
        description="additive or replace; the configured default applies when omitted",
    )


class TeamResponse(BaseModel):
    """Schema for team response."""

    id: int
    name: str
    members: list[EmployeeSummary] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "MembershipMode",
    "TeamCreate",
    "TeamUpdate",
    "TeamMembersUpdate",
    "TeamResponse",
]
