"""Employee model: identity, credentials and role."""

from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, Enum as SQLEnum, Integer, String
from sqlalchemy.orm import relationship

from backend.database import Base
from backend.services.time_manager import utc_now_naive

if TYPE_CHECKING:
    from backend.models.membership import Membership
    from backend.models.task import Task
    from backend.models.team import Team


class EmployeeRole(str, Enum):
    """Privilege levels for employees."""

    EMPLOYEE = "Employee"
    ADMIN = "Admin"


class Employee(Base):
    """Model for employees who own tasks and belong to teams."""

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(SQLEnum(EmployeeRole), default=EmployeeRole.EMPLOYEE, nullable=False)
    created_at = Column(DateTime, default=utc_now_naive, nullable=False)
    updated_at = Column(DateTime, default=utc_now_naive, onupdate=utc_now_naive, nullable=False)

    tasks = relationship(
        "Task",
        back_populates="employee",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    memberships = relationship(
        "Membership",
        back_populates="employee",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    teams = relationship(
        "Team",
        secondary="memberships",
        viewonly=True,
        order_by="Team.id",
    )

    def __repr__(self) -> str:
        """String representation of Employee."""
        return f"<Employee(id={self.id}, name='{self.name}', role={self.role})>"


__all__ = ["Employee", "EmployeeRole"]
