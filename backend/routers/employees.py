"""API router for employees."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.database import get_db
from backend.dependencies import RecordId, get_current_employee
from backend.models.employee import Employee
from backend.schemas.employee import EmployeeSummary
from backend.services.employee_service import EmployeeService

router = APIRouter()


@router.get("/me", response_model=EmployeeSummary)
def get_me(
    current_employee: Employee = Depends(get_current_employee),
) -> EmployeeSummary:
    """Get the employee behind the current token."""
    return EmployeeSummary.model_validate(current_employee)


@router.get("/{employee_id}", response_model=EmployeeSummary)
def get_employee(
    employee_id: RecordId,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> EmployeeSummary:
    """Get a specific employee by ID."""
    employee = EmployeeService.require_employee(db, employee_id)
    return EmployeeSummary.model_validate(employee)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: RecordId,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> None:
    """Delete an employee with their tasks and memberships."""
    EmployeeService.delete_employee(db, employee_id, current_employee)
