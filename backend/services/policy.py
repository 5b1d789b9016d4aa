"""Authorization policy shared by every mutating operation.

Two rules exist:

* self-or-admin: the actor owns the resource, or is an administrator;
* admin-only: the actor is an administrator.

The checks only read the actor and the owner id, so services call them
before touching the database session.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from backend.errors import ForbiddenError
from backend.models.employee import EmployeeRole

if TYPE_CHECKING:
    from backend.models.employee import Employee

logger = logging.getLogger("teamtasks.auth")

ADMIN_ONLY_MESSAGE = "Only administrators can use this operation."


def is_admin(actor: "Employee") -> bool:
    """Return True when the actor holds the Admin role."""
    return actor.role == EmployeeRole.ADMIN


def can_act_for(actor: "Employee", owner_id: int | None) -> bool:
    """Self-or-admin decision for a resource owned by `owner_id`."""
    if is_admin(actor):
        return True
    return owner_id is not None and actor.id == owner_id


def ensure_self_or_admin(actor: "Employee", owner_id: int | None, reason: str) -> None:
    """Raise ForbiddenError unless the actor may act for `owner_id`."""
    if not can_act_for(actor, owner_id):
        logger.warning(
            "Denied: employee_id=%s role=%s owner_id=%s reason=%s",
            actor.id,
            actor.role,
            owner_id,
            reason,
        )
        raise ForbiddenError(reason)


def ensure_admin(actor: "Employee", reason: str = ADMIN_ONLY_MESSAGE) -> None:
    """Raise ForbiddenError unless the actor is an administrator."""
    if not is_admin(actor):
        logger.warning("Denied: employee_id=%s role=%s reason=%s", actor.id, actor.role, reason)
        raise ForbiddenError(reason)
