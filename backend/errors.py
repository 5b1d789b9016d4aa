"""Domain exceptions raised by services and translated to HTTP responses in `backend.main`."""

from __future__ import annotations

NOT_AUTHORIZED_MESSAGE = "Not Authorized"


class ServiceError(Exception):
    """Base class for expected, request-terminating failures."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def detail(self) -> object:
        """Payload placed under `detail` in the JSON error body."""
        return self.message


class UnauthenticatedError(ServiceError):
    """Missing, malformed, invalid or expired credentials."""

    status_code = 401

    def __init__(self, message: str = NOT_AUTHORIZED_MESSAGE) -> None:
        super().__init__(message)


class ForbiddenError(ServiceError):
    """The authorization policy denied the action."""

    status_code = 403


class NotFoundError(ServiceError):
    """A referenced employee, team or task id does not resolve."""

    status_code = 404


class ValidationError(ServiceError):
    """Input violates one or more business constraints."""

    status_code = 422

    def __init__(self, errors: list[str] | str) -> None:
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))

    @property
    def detail(self) -> object:
        return self.errors


__all__ = [
    "NOT_AUTHORIZED_MESSAGE",
    "ServiceError",
    "UnauthenticatedError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
]
