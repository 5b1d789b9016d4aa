"""Join entity between employees and teams."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from backend.database import Base
from backend.services.time_manager import utc_now_naive


class Membership(Base):
    """One row per (employee, team) pair; the composite key keeps pairs unique."""

    __tablename__ = "memberships"

    employee_id = Column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    team_id = Column(
        Integer,
        ForeignKey("teams.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,  # common filter: WHERE team_id=...
    )
    joined_at = Column(DateTime, default=utc_now_naive, nullable=False)

    employee = relationship("Employee", back_populates="memberships")
    team = relationship("Team", back_populates="memberships")

    def __repr__(self) -> str:
        return f"<Membership(employee_id={self.employee_id}, team_id={self.team_id})>"


__all__ = ["Membership"]
