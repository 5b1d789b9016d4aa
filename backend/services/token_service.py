"""Signed, expiring identity tokens."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import logging

from jose import JWTError, jwt

from backend.config import get_settings
from backend.database import MAX_INTEGER
from backend.errors import UnauthenticatedError
from backend.services.time_manager import TimeManager

logger = logging.getLogger("teamtasks.auth")

# The one claim that carries the employee identity
SUBJECT_CLAIM = "employee_id"


@dataclass(frozen=True, slots=True)
class TokenPayload:
    """Decoded token contents."""

    subject_id: int
    expires_at: datetime


class TokenService:
    """Encode and decode HMAC-signed JWT access tokens."""

    @staticmethod
    def encode(subject_id: int, expires_at: datetime | None = None) -> str:
        """Create a token for `subject_id` that expires at `expires_at`.

        When no expiry is given the configured lifetime
        (`security.access_token_expire_minutes`) is added to the wall-clock time,
        which is also what `decode` checks against.
        """
        settings = get_settings()
        if expires_at is None:
            expires_at = TimeManager.get_real_time() + timedelta(minutes=settings.access_token_expire_minutes)
        elif expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)

        payload = {
            SUBJECT_CLAIM: subject_id,
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)

    @staticmethod
    def decode(token: str | None) -> TokenPayload:
        """Verify signature and expiry and return the payload.

        Raises:
            UnauthenticatedError: for any malformed, tampered or expired token.
            The caller never learns which check failed.
        """
        if not token:
            raise UnauthenticatedError()

        settings = get_settings()
        try:
            claims = jwt.decode(
                token,
                settings.secret_key,
                algorithms=[settings.algorithm],
                options={"verify_exp": True, "require_exp": True},
            )
        except JWTError as exc:
            logger.debug("Token rejected: %s", exc)
            raise UnauthenticatedError() from exc

        subject_id = claims.get(SUBJECT_CLAIM)
        # bool is an int subclass; a boolean subject is never valid
        if not isinstance(subject_id, int) or isinstance(subject_id, bool):
            logger.debug("Token rejected: missing or invalid %s claim", SUBJECT_CLAIM)
            raise UnauthenticatedError()
        if not 0 < subject_id <= MAX_INTEGER:
            logger.debug("Token rejected: %s claim out of range", SUBJECT_CLAIM)
            raise UnauthenticatedError()

        expires_at = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
        return TokenPayload(subject_id=subject_id, expires_at=expires_at)
