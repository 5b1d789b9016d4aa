"""Create an administrator account.

Registration over HTTP only ever creates regular employees, so the first
administrator has to be created here.
"""

import argparse
import getpass
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.database import SessionLocal, init_db  # noqa: E402
from backend.models.employee import EmployeeRole  # noqa: E402
from backend.schemas.employee import EmployeeCreate  # noqa: E402
from backend.services.employee_service import EmployeeService  # noqa: E402


def main(name: str, password: str) -> None:
    init_db()
    db = SessionLocal()
    try:
        employee = EmployeeService.create_employee(
            db,
            EmployeeCreate(name=name, password=password),
            role=EmployeeRole.ADMIN,
        )
        print(f"Created admin: {employee.name} (id: {employee.id})")
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create an administrator account.")
    parser.add_argument("name", help="display name")
    parser.add_argument("--password", help="password; prompted for when omitted")
    args = parser.parse_args()
    main(args.name, args.password or getpass.getpass("Password: "))
