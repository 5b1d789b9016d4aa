"""Pydantic schemas for login and registration."""

from pydantic import BaseModel, Field

from backend.schemas.employee import EmployeeId, EmployeeSummary


class LoginRequest(BaseModel):
    """Credentials for POST /auth/login."""

    employee_id: EmployeeId = Field(..., description="Employee identifier")
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Access token together with the authenticated employee."""

    token: str
    token_type: str = "bearer"
    employee: EmployeeSummary


__all__ = ["LoginRequest", "TokenResponse"]
