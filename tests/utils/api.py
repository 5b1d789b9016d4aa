"""Helpers for building API paths and auth headers in tests."""

from __future__ import annotations

from backend.config import get_settings
from backend.services.token_service import TokenService


def api_path(path: str) -> str:
    """Return the absolute API path under the configured prefix.

    Args:
        path: Relative path, with or without a leading `/`.

    Returns:
        A string like `/api/<path>`.
    """

    if not path.startswith("/"):
        path = f"/{path}"
    return f"{get_settings().api_prefix}{path}"


def auth_headers(employee_id: int) -> dict[str, str]:
    """Authorization header carrying a fresh token for `employee_id`."""

    return {"Authorization": f"Bearer {TokenService.encode(employee_id)}"}


__all__ = ["api_path", "auth_headers"]
