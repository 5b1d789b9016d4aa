"""API router for login, registration and logout."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.database import get_db
from backend.dependencies import get_current_employee
from backend.models.employee import Employee
from backend.schemas.auth import LoginRequest, TokenResponse
from backend.schemas.employee import EmployeeCreate, EmployeeSummary
from backend.services.auth_service import AuthService

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
) -> TokenResponse:
    """Exchange employee id and password for an access token."""
    token, employee = AuthService.login(db, credentials.employee_id, credentials.password)
    return TokenResponse(token=token, employee=EmployeeSummary.model_validate(employee))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    employee: EmployeeCreate,
    db: Session = Depends(get_db),
) -> TokenResponse:
    """Create an employee account and sign it in."""
    token, created = AuthService.register(db, employee)
    return TokenResponse(token=token, employee=EmployeeSummary.model_validate(created))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    current_employee: Employee = Depends(get_current_employee),
) -> None:
    """Tokens are stateless; the client discards its copy."""
