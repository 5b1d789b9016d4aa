"""Service for managing employees."""

from typing import TYPE_CHECKING

import logging

from sqlalchemy.orm import Session

from backend.errors import NotFoundError
from backend.models.employee import Employee, EmployeeRole
from backend.services import policy
from backend.utils.security import hash_password

if TYPE_CHECKING:
    from backend.schemas.employee import EmployeeCreate

logger = logging.getLogger("teamtasks.employees")


class EmployeeService:
    """Business logic for employees."""

    @staticmethod
    def create_employee(
        db: Session,
        employee_data: "EmployeeCreate",
        role: EmployeeRole = EmployeeRole.EMPLOYEE,
    ) -> Employee:
        employee = Employee(
            name=employee_data.name,
            password_hash=hash_password(employee_data.password),
            role=role,
        )
        db.add(employee)
        db.commit()
        db.refresh(employee)
        logger.info("Employee created: employee_id=%s role=%s", employee.id, employee.role.value)
        return employee

    @staticmethod
    def get_employee(db: Session, employee_id: int) -> Employee | None:
        return db.query(Employee).filter(Employee.id == employee_id).first()

    @staticmethod
    def require_employee(db: Session, employee_id: int) -> Employee:
        """Load an employee or raise NotFoundError."""
        employee = EmployeeService.get_employee(db, employee_id)
        if employee is None:
            raise NotFoundError(f"Employee with id {employee_id} not found")
        return employee

    @staticmethod
    def get_employees_by_ids(db: Session, employee_ids: list[int]) -> tuple[list[Employee], list[int]]:
        """Load employees by ids.

        Returns:
            The found employees ordered by id, and the sorted ids that did not resolve.
        """
        unique_ids = sorted(set(employee_ids))
        if not unique_ids:
            return [], []
        employees = (
            db.query(Employee)
            .filter(Employee.id.in_(unique_ids))
            .order_by(Employee.id)
            .all()
        )
        found_ids = {employee.id for employee in employees}
        missing = [employee_id for employee_id in unique_ids if employee_id not in found_ids]
        return employees, missing

    @staticmethod
    def delete_employee(db: Session, employee_id: int, actor: Employee) -> None:
        """Delete an employee together with owned tasks and memberships."""
        employee = EmployeeService.require_employee(db, employee_id)
        policy.ensure_self_or_admin(
            actor,
            employee.id,
            "Only administrators can delete other employees.",
        )
        db.delete(employee)
        db.commit()
        logger.info("Employee deleted: employee_id=%s by=%s", employee_id, actor.id)
