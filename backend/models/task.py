"""Task model: a unit of work owned by one employee."""

from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, Enum as SQLEnum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.database import Base
from backend.services.time_manager import utc_now_naive

if TYPE_CHECKING:
    from backend.models.employee import Employee


class TaskStatus(str, Enum):
    """Lifecycle states of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class Task(Base):
    """Model for tasks."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    status = Column(SQLEnum(TaskStatus), nullable=False, default=TaskStatus.PENDING)
    category = Column(String(255), nullable=True)
    detail = Column(Text, nullable=True)
    due = Column(DateTime, nullable=False, index=True)  # naive UTC
    employee_id = Column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime, default=utc_now_naive, nullable=False)
    updated_at = Column(DateTime, default=utc_now_naive, onupdate=utc_now_naive, nullable=False)

    # Relationships
    employee = relationship("Employee", back_populates="tasks")

    def __repr__(self) -> str:
        """String representation of Task."""
        return f"<Task(id={self.id}, title='{self.title}', status={self.status}, employee_id={self.employee_id})>"


Index("ix_tasks_employee_due", Task.employee_id, Task.due)
