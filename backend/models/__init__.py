"""Database models."""

from backend.models.employee import Employee, EmployeeRole
from backend.models.membership import Membership
from backend.models.task import Task, TaskStatus
from backend.models.team import Team

__all__ = ["Employee", "EmployeeRole", "Membership", "Task", "TaskStatus", "Team"]
