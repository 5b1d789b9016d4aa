"""FastAPI dependencies shared by routers."""

from typing import Annotated

from fastapi import Depends, Header, Path
from sqlalchemy.orm import Session

from backend.database import MAX_INTEGER, get_db
from backend.models.employee import Employee
from backend.services.auth_service import AuthService

# Path ids outside the INTEGER range can never match a row; reject them with 422
RecordId = Annotated[int, Path(le=MAX_INTEGER)]


def get_current_employee(
    authorization: str | None = Header(None),
    db: Session = Depends(get_db),
) -> Employee:
    """Resolve the acting employee from the request's bearer token."""
    return AuthService.authenticate(db, authorization)
