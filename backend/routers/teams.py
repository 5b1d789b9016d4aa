"""API router for teams and their rosters."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.database import get_db
from backend.dependencies import RecordId, get_current_employee
from backend.models.employee import Employee
from backend.schemas.employee import EmployeeSummary
from backend.schemas.team import TeamCreate, TeamMembersUpdate, TeamResponse, TeamUpdate
from backend.services.team_service import TeamService

router = APIRouter()


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
def create_team(
    team: TeamCreate,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> TeamResponse:
    """Create a new team (administrators only)."""
    created_team = TeamService.create_team(db, team, current_employee)
    return TeamResponse.model_validate(created_team)


@router.get("/team/{team_id}", response_model=list[EmployeeSummary])
def get_team_members(
    team_id: RecordId,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> list[EmployeeSummary]:
    """Members of a team."""
    members = TeamService.list_team_members(db, team_id)
    return [EmployeeSummary.model_validate(member) for member in members]


@router.get("/employee/{employee_id}", response_model=list[TeamResponse])
def get_employee_teams(
    employee_id: RecordId,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> list[TeamResponse]:
    """Teams an employee belongs to."""
    teams = TeamService.list_teams_for_employee(db, employee_id)
    return [TeamResponse.model_validate(team) for team in teams]


@router.patch("/management/{team_id}", response_model=list[EmployeeSummary])
def update_team_members(
    team_id: RecordId,
    payload: TeamMembersUpdate,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> list[EmployeeSummary]:
    """Add members to a team or replace its roster (administrators only)."""
    members = TeamService.replace_or_add_members(
        db,
        team_id,
        payload.employees,
        current_employee,
        payload.mode,
    )
    return [EmployeeSummary.model_validate(member) for member in members]


@router.patch("/{team_id}", response_model=TeamResponse)
def update_team(
    team_id: RecordId,
    team_update: TeamUpdate,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> TeamResponse:
    """Rename a team (administrators only)."""
    updated_team = TeamService.update_team(db, team_id, team_update, current_employee)
    return TeamResponse.model_validate(updated_team)


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_team(
    team_id: RecordId,
    db: Session = Depends(get_db),
    current_employee: Employee = Depends(get_current_employee),
) -> None:
    """Delete a team (administrators only)."""
    TeamService.delete_team(db, team_id, current_employee)
