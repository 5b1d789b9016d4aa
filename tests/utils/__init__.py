"""Shared helpers for the test suite."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from typing import Callable

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from backend.database import enable_sqlite_foreign_keys
from backend.models.employee import Employee, EmployeeRole
from backend.models.membership import Membership
from backend.models.task import Task, TaskStatus
from backend.models.team import Team
from backend.utils.security import hash_password

from .api import api_path, auth_headers
from .datetime_helpers import local_datetime

__all__ = [
    "api_path",
    "auth_headers",
    "local_datetime",
    "create_sqlite_engine",
    "clear_tables",
    "make_employee",
    "make_team",
    "make_task",
    "test_client_with_session",
]

DEFAULT_PASSWORD = "secret-password"

# Child tables first so foreign keys never block the cleanup
_TABLES = ("memberships", "tasks", "teams", "employees")


def create_sqlite_engine(db_name: str) -> tuple[Engine, sessionmaker]:
    """Create an in-memory SQLite engine and session factory for tests.

    `db_name` only labels the module that owns the engine.

    StaticPool reuses one connection so every session sees the same
    in-memory database. Foreign keys are enforced like in production.
    """

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return engine, session_factory


def clear_tables(db: Session) -> None:
    """Delete all rows so each test starts from an empty database."""

    for table in _TABLES:
        db.execute(text(f"DELETE FROM {table}"))
    db.commit()


def make_employee(
    db: Session,
    name: str = "Employee",
    role: EmployeeRole = EmployeeRole.EMPLOYEE,
    password: str = DEFAULT_PASSWORD,
) -> Employee:
    """Persist an employee with a hashed password."""

    employee = Employee(name=name, role=role, password_hash=hash_password(password))
    db.add(employee)
    db.commit()
    db.refresh(employee)
    return employee


def make_team(db: Session, name: str = "Team", members: list[Employee] | None = None) -> Team:
    """Persist a team with the given members."""

    team = Team(name=name)
    for member in members or []:
        team.memberships.append(Membership(employee_id=member.id))
    db.add(team)
    db.commit()
    db.refresh(team)
    return team


def make_task(db: Session, owner: Employee, due, title: str = "Task", **fields) -> Task:
    """Persist a task; `due` must already be naive UTC."""

    fields.setdefault("status", TaskStatus.PENDING)
    task = Task(title=title, due=due, employee_id=owner.id, **fields)
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


@contextmanager
def test_client_with_session(
    app,
    dependency: Callable[..., Generator[Session, None, None]],
    session: Session,
) -> Generator[TestClient, None, None]:
    """Provide a TestClient whose database dependency yields `session`."""

    def override_dependency() -> Generator[Session, None, None]:
        yield session

    app.dependency_overrides[dependency] = override_dependency
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


test_client_with_session.__test__ = False  # type: ignore[attr-defined]
