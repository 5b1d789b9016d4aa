"""Authentication: bearer-token resolution, login and registration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from backend.errors import UnauthenticatedError
from backend.models.employee import Employee
from backend.services.employee_service import EmployeeService
from backend.services.token_service import TokenService
from backend.utils.security import verify_password

if TYPE_CHECKING:
    from backend.schemas.employee import EmployeeCreate

logger = logging.getLogger("teamtasks.auth")

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token part of an `Authorization: Bearer <token>` header."""
    if not authorization:
        raise UnauthenticatedError()
    parts = authorization.strip().split(None, 1)
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME or not parts[1].strip():
        raise UnauthenticatedError()
    return parts[1].strip()


class AuthService:
    """Business logic for authentication."""

    @staticmethod
    def authenticate(db: Session, authorization: str | None) -> Employee:
        """Resolve the acting employee from an Authorization header.

        Raises:
            UnauthenticatedError: header missing or malformed, token invalid or
            expired, or the employee no longer exists.
        """
        token = extract_bearer_token(authorization)
        payload = TokenService.decode(token)
        employee = EmployeeService.get_employee(db, payload.subject_id)
        if employee is None:
            logger.info("Token subject no longer exists: employee_id=%s", payload.subject_id)
            raise UnauthenticatedError()
        return employee

    @staticmethod
    def login(db: Session, employee_id: int, password: str) -> tuple[str, Employee]:
        """Check credentials and issue a token."""
        employee = EmployeeService.get_employee(db, employee_id)
        if employee is None or not verify_password(password, employee.password_hash):
            logger.info("Login failed: employee_id=%s", employee_id)
            raise UnauthenticatedError("Invalid credentials")
        logger.info("Login succeeded: employee_id=%s", employee.id)
        return TokenService.encode(employee.id), employee

    @staticmethod
    def register(db: Session, employee_data: "EmployeeCreate") -> tuple[str, Employee]:
        """Create an employee with the Employee role and issue a token."""
        employee = EmployeeService.create_employee(db, employee_data)
        return TokenService.encode(employee.id), employee
