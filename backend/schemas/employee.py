"""Pydantic schemas for Employee model."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from backend.database import MAX_INTEGER
from backend.models.employee import EmployeeRole


# Employee id accepted in request bodies
EmployeeId = Annotated[int, Field(le=MAX_INTEGER)]


class EmployeeCreate(BaseModel):
    """Schema for registering an employee."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    password: str = Field(..., min_length=1, max_length=128, description="Plain-text password")
    password_confirmation: str | None = Field(None, description="Must match password when given")

    @model_validator(mode="after")
    def passwords_match(self) -> "EmployeeCreate":
        if self.password_confirmation is not None and self.password_confirmation != self.password:
            raise ValueError("password_confirmation does not match password")
        return self


class EmployeeSummary(BaseModel):
    """Lightweight schema embedded in team responses."""

    id: int
    name: str
    role: EmployeeRole

    model_config = ConfigDict(from_attributes=True)


__all__ = ["EmployeeId", "EmployeeCreate", "EmployeeSummary"]
