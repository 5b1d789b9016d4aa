"""Service for team business logic and roster management."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.config import get_settings
from backend.errors import NotFoundError, ValidationError
from backend.models.employee import Employee
from backend.models.membership import Membership
from backend.models.team import Team
from backend.schemas.team import MembershipMode
from backend.services import policy
from backend.services.employee_service import EmployeeService

if TYPE_CHECKING:
    from backend.schemas.team import TeamCreate, TeamUpdate

logger = logging.getLogger("teamtasks.teams")


def _clean_name(name: str | None) -> str:
    if name is None or not name.strip():
        raise ValidationError("name must not be empty")
    return name.strip()


def _missing_employees_error(missing: list[int]) -> NotFoundError:
    return NotFoundError(f"Employee with id {', '.join(str(i) for i in missing)} not found")


class TeamService:
    """Service for managing teams and their members."""

    @staticmethod
    def get_team(db: Session, team_id: int) -> Team | None:
        """Get a team by ID."""
        return db.query(Team).filter(Team.id == team_id).first()

    @staticmethod
    def require_team(db: Session, team_id: int) -> Team:
        """Get a team by ID or raise NotFoundError."""
        team = TeamService.get_team(db, team_id)
        if team is None:
            raise NotFoundError(f"Team with id {team_id} not found")
        return team

    @staticmethod
    def create_team(
        db: Session,
        team_data: "TeamCreate",
        actor: Employee,
        enroll_creator: bool | None = None,
    ) -> Team:
        """Create a team; the creating admin joins it when `enroll_creator` is set.

        `enroll_creator` defaults to the `teams.enroll_creator` setting.
        """
        policy.ensure_admin(actor)
        name = _clean_name(team_data.name)
        if enroll_creator is None:
            enroll_creator = get_settings().enroll_creator

        team = Team(name=name)
        if enroll_creator:
            team.memberships.append(Membership(employee_id=actor.id))
        db.add(team)
        db.commit()
        db.refresh(team)
        logger.info("Team created: team_id=%s by=%s enrolled=%s", team.id, actor.id, enroll_creator)
        return team

    @staticmethod
    def update_team(db: Session, team_id: int, team_data: "TeamUpdate", actor: Employee) -> Team:
        """Rename a team."""
        policy.ensure_admin(actor)
        team = TeamService.require_team(db, team_id)
        team.name = _clean_name(team_data.name)
        db.commit()
        db.refresh(team)
        logger.info("Team updated: team_id=%s by=%s", team.id, actor.id)
        return team

    @staticmethod
    def delete_team(db: Session, team_id: int, actor: Employee) -> None:
        """Delete a team and its memberships."""
        policy.ensure_admin(actor)
        team = TeamService.require_team(db, team_id)
        db.delete(team)
        db.commit()
        logger.info("Team deleted: team_id=%s by=%s", team_id, actor.id)

    @staticmethod
    def list_team_members(db: Session, team_id: int) -> list[Employee]:
        """All employees with a membership in the team."""
        team = TeamService.require_team(db, team_id)
        return list(team.members)

    @staticmethod
    def list_teams_for_employee(db: Session, employee_id: int) -> list[Team]:
        """All teams the employee belongs to."""
        employee = EmployeeService.require_employee(db, employee_id)
        return list(employee.teams)

    @staticmethod
    def replace_or_add_members(
        db: Session,
        team_id: int,
        employee_ids: list[int] | None,
        actor: Employee,
        mode: MembershipMode | None = None,
    ) -> list[Employee]:
        """Change a team's roster and return the resulting members.

        additive: keep current members and add the given ids; an empty list is
        rejected. replace: the roster becomes exactly the given ids; an empty
        list removes everyone. In both modes every id must resolve before any
        row changes.
        """
        policy.ensure_admin(actor)
        team = TeamService.require_team(db, team_id)
        if mode is None:
            mode = MembershipMode(get_settings().membership_mode)
        if employee_ids is None:
            raise ValidationError("employees is required")

        current_ids = {membership.employee_id for membership in team.memberships}

        if mode == MembershipMode.ADDITIVE:
            if not employee_ids:
                raise ValidationError("employees must not be empty")
            new_ids = sorted(set(employee_ids) - current_ids)
            employees, missing = EmployeeService.get_employees_by_ids(db, new_ids)
            if missing:
                raise _missing_employees_error(missing)
            to_remove: list[Membership] = []
            to_add = [employee.id for employee in employees]
        else:
            employees, missing = EmployeeService.get_employees_by_ids(db, employee_ids)
            if missing:
                raise _missing_employees_error(missing)
            target_ids = {employee.id for employee in employees}
            to_remove = [m for m in team.memberships if m.employee_id not in target_ids]
            to_add = sorted(target_ids - current_ids)

        try:
            for membership in to_remove:
                team.memberships.remove(membership)
            for employee_id in to_add:
                team.memberships.append(Membership(employee_id=employee_id))
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.error("Roster update rolled back: team_id=%s", team_id, exc_info=True)
            raise

        db.refresh(team)
        logger.info(
            "Roster updated: team_id=%s mode=%s added=%s removed=%s by=%s",
            team.id,
            mode.value,
            to_add,
            sorted(m.employee_id for m in to_remove),
            actor.id,
        )
        return list(team.members)
