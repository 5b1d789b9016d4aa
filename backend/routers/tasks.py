"""API router for tasks."""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from backend.database import MAX_INTEGER, get_db
from backend.dependencies import RecordId, get_current_employee
from backend.models.employee import Employee
from backend.models.task import TaskStatus
from backend.schemas.task import TaskCreate, TaskFilters, TaskResponse, TaskUpdate
from backend.services.task_service import TaskService

router = APIRouter()

logger = logging.getLogger("teamtasks.tasks")


def _resolve_offset(raw: str | None) -> int:
    """Parse the `offset` query value; anything that is not an integer means 0.

    Values beyond the storable integer range are capped, which yields an empty page.
    """
    if raw is None:
        return 0
    try:
        value = int(raw)
    except ValueError:
        logger.debug("Ignoring non-numeric offset %r", raw)
        return 0
    return min(max(value, 0), MAX_INTEGER)


def _to_response(tasks) -> list[TaskResponse]:
    return [TaskResponse.model_validate(task) for task in tasks]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> TaskResponse:
    """Create a new task."""
    created_task = TaskService.create_task(db, task, current_employee)
    return TaskResponse.model_validate(created_task)


@router.get("/employee/{employee_id}/today", response_model=list[TaskResponse])
def get_employee_today_tasks(
    employee_id: RecordId,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> list[TaskResponse]:
    """Tasks of an employee due today."""
    return _to_response(TaskService.list_for_employee_today(db, employee_id))


@router.get("/employee/{employee_id}", response_model=list[TaskResponse])
def get_employee_tasks(
    employee_id: RecordId,
    offset: str | None = Query(None, description="Number of tasks to skip"),
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> list[TaskResponse]:
    """One page of an employee's tasks."""
    tasks = TaskService.list_for_employee_paginated(db, employee_id, _resolve_offset(offset))
    return _to_response(tasks)


@router.get("/team/{team_id}/today", response_model=list[TaskResponse])
def get_team_today_tasks(
    team_id: RecordId,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> list[TaskResponse]:
    """Tasks of all team members due today."""
    return _to_response(TaskService.list_for_team_today(db, team_id))


@router.get("/team/{team_id}", response_model=list[TaskResponse])
def get_team_tasks(
    team_id: RecordId,
    category: str | None = Query(None, description="Only tasks with this category"),
    task_status: TaskStatus | None = Query(None, alias="status", description="Only tasks in this status"),
    employee_id: int | None = Query(None, le=MAX_INTEGER, description="Only tasks of this team member"),
    offset: str | None = Query(None, description="Number of tasks to skip"),
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> list[TaskResponse]:
    """One page of the team's tasks, optionally filtered."""
    filters = TaskFilters(category=category, status=task_status, employee_id=employee_id)
    tasks = TaskService.list_for_team(db, team_id, filters, _resolve_offset(offset))
    return _to_response(tasks)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: RecordId,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> TaskResponse:
    """Get a specific task by ID."""
    return TaskResponse.model_validate(TaskService.get_task(db, task_id))


@router.patch("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: RecordId,
    task_update: TaskUpdate,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> TaskResponse:
    """Update the fields sent in the request body."""
    updated_task = TaskService.update_task(db, task_id, task_update, current_employee)
    return TaskResponse.model_validate(updated_task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: RecordId,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> None:
    """Delete a task."""
    TaskService.delete_task(db, task_id, current_employee)
