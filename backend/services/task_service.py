"""Service for task business logic."""

from datetime import datetime
import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Query, Session

from backend.errors import NotFoundError, ValidationError
from backend.models.membership import Membership
from backend.models.task import Task
from backend.services import policy
from backend.services.employee_service import EmployeeService
from backend.utils.date_utils import get_day_window, to_storage

if TYPE_CHECKING:
    from backend.models.employee import Employee
    from backend.schemas.task import TaskCreate, TaskFilters, TaskUpdate

logger = logging.getLogger("teamtasks.tasks")

PAGE_SIZE = 30

# Columns that may be omitted from an update but never set to null
_NON_NULLABLE_FIELDS = ("title", "status", "due", "employee_id")


class TaskService:
    """Service for creating, changing and listing tasks."""

    # ----- helpers -----

    @staticmethod
    def _ordered(query: Query) -> Query:
        """Order by due date; id breaks ties so paging is deterministic."""
        return query.order_by(Task.due.asc(), Task.id.asc())

    @staticmethod
    def _paginate(query: Query, offset: int) -> Query:
        return query.offset(max(offset, 0)).limit(PAGE_SIZE)

    @staticmethod
    def _team_tasks(db: Session, team_id: int) -> Query:
        """Tasks owned by any member of the team."""
        return (
            db.query(Task)
            .join(Membership, Membership.employee_id == Task.employee_id)
            .filter(Membership.team_id == team_id)
        )

    @staticmethod
    def _due_today(query: Query, now: datetime | None) -> Query:
        start, end = get_day_window(now)
        return query.filter(Task.due >= start, Task.due < end)

    # ----- mutations -----

    @staticmethod
    def create_task(db: Session, task_data: "TaskCreate", actor: "Employee") -> Task:
        """Create a task owned by `task_data.employee_id`.

        Employees may only create tasks for themselves; administrators may
        create tasks for anyone.
        """
        policy.ensure_self_or_admin(
            actor,
            task_data.employee_id,
            "Only administrators can create tasks for other employees.",
        )
        EmployeeService.require_employee(db, task_data.employee_id)

        payload = task_data.model_dump()
        payload["due"] = to_storage(task_data.due)
        task = Task(**payload)
        db.add(task)
        db.commit()
        db.refresh(task)
        logger.info("Task created: task_id=%s owner=%s by=%s", task.id, task.employee_id, actor.id)
        return task

    @staticmethod
    def get_task(db: Session, task_id: int) -> Task:
        """Get a task by ID; any authenticated employee may read any task."""
        task = db.query(Task).filter(Task.id == task_id).first()
        if task is None:
            raise NotFoundError(f"Task with id {task_id} not found")
        return task

    @staticmethod
    def update_task(db: Session, task_id: int, task_data: "TaskUpdate", actor: "Employee") -> Task:
        """Apply the fields present in `task_data` to an existing task."""
        task = TaskService.get_task(db, task_id)
        policy.ensure_self_or_admin(
            actor,
            task.employee_id,
            "You are not allowed to update this task.",
        )

        update_data = task_data.model_dump(exclude_unset=True)
        errors = [
            f"{field} must not be null"
            for field in _NON_NULLABLE_FIELDS
            if field in update_data and update_data[field] is None
        ]
        if errors:
            raise ValidationError(errors)

        new_owner_id = update_data.get("employee_id")
        if new_owner_id is not None and new_owner_id != task.employee_id:
            # Handing a task over counts as acting for the new owner as well
            policy.ensure_self_or_admin(
                actor,
                new_owner_id,
                "Only administrators can assign tasks to other employees.",
            )
            EmployeeService.require_employee(db, new_owner_id)

        if "due" in update_data:
            update_data["due"] = to_storage(update_data["due"])

        for key, value in update_data.items():
            setattr(task, key, value)

        db.commit()
        db.refresh(task)
        logger.info("Task updated: task_id=%s fields=%s by=%s", task.id, sorted(update_data), actor.id)
        return task

    @staticmethod
    def delete_task(db: Session, task_id: int, actor: "Employee") -> None:
        """Delete a task owned by the actor, or any task when the actor is an admin."""
        task = TaskService.get_task(db, task_id)
        policy.ensure_self_or_admin(
            actor,
            task.employee_id,
            "You are not allowed to delete this task.",
        )
        db.delete(task)
        db.commit()
        logger.info("Task deleted: task_id=%s by=%s", task_id, actor.id)

    # ----- listings -----

    @staticmethod
    def list_for_employee_today(
        db: Session,
        employee_id: int,
        now: datetime | None = None,
    ) -> list[Task]:
        """Tasks of one employee due within the current calendar day."""
        query = db.query(Task).filter(Task.employee_id == employee_id)
        query = TaskService._due_today(query, now)
        return TaskService._ordered(query).all()

    @staticmethod
    def list_for_employee_paginated(db: Session, employee_id: int, offset: int = 0) -> list[Task]:
        """One page of an employee's tasks ordered by due date."""
        query = db.query(Task).filter(Task.employee_id == employee_id)
        return TaskService._paginate(TaskService._ordered(query), offset).all()

    @staticmethod
    def list_for_team(
        db: Session,
        team_id: int,
        filters: "TaskFilters | None" = None,
        offset: int = 0,
    ) -> list[Task]:
        """One page of the team's tasks, narrowed by any filter that is set."""
        query = TaskService._team_tasks(db, team_id)
        if filters is not None:
            if filters.category:
                query = query.filter(Task.category == filters.category)
            if filters.status is not None:
                query = query.filter(Task.status == filters.status)
            if filters.employee_id is not None:
                query = query.filter(Task.employee_id == filters.employee_id)
        return TaskService._paginate(TaskService._ordered(query), offset).all()

    @staticmethod
    def list_for_team_today(db: Session, team_id: int, now: datetime | None = None) -> list[Task]:
        """All of the team's tasks due today.

        Unlike `list_for_team` this listing is not paginated.
        """
        query = TaskService._due_today(TaskService._team_tasks(db, team_id), now)
        return TaskService._ordered(query).all()
