#!/usr/bin/env python3
"""Create all tables in the configured database."""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.config import get_settings  # noqa: E402
from backend.database import init_db  # noqa: E402
from backend.logging_config import setup_logging  # noqa: E402

if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings.log_dir, settings.debug)
    init_db()
    print(f"Database initialized: {settings.database_url}")
