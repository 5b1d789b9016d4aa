"""Team model: a named roster of employees."""

from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from backend.database import Base
from backend.services.time_manager import utc_now_naive

if TYPE_CHECKING:
    from backend.models.employee import Employee
    from backend.models.membership import Membership


class Team(Base):
    """Model for teams."""

    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=utc_now_naive, nullable=False)
    updated_at = Column(DateTime, default=utc_now_naive, onupdate=utc_now_naive, nullable=False)

    # Relationships
    memberships = relationship(
        "Membership",
        back_populates="team",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    members = relationship(
        "Employee",
        secondary="memberships",
        viewonly=True,
        order_by="Employee.id",
    )

    def __repr__(self) -> str:
        """String representation of Team."""
        return f"<Team(id={self.id}, name='{self.name}')>"
