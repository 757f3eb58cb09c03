"""Password hashing and JWT creation/verification for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

import bcrypt
import jwt

from app.core.config import settings

# Min/max lengths for user fields (input validation).
NAME_MIN_LEN = 5
NAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128
# bcrypt only reads the first 72 bytes; longer secrets are refused, never truncated.
PASSWORD_MAX_BYTES = 72

# Claim carrying the user id inside the token.
USER_ID_CLAIM = "userId"


class TokenRejectionReason(str, Enum):
    """Why a bearer token failed verification. Logged, never sent to clients."""

    MALFORMED = "malformed"
    BAD_SIGNATURE = "bad-signature"
    EXPIRED = "expired"


@dataclass(frozen=True)
class TokenPayload:
    """Verified token contents."""

    user_id: str


@dataclass(frozen=True)
class TokenRejection:
    """Verification failure with its reason."""

    reason: TokenRejectionReason
    detail: str = ""


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > PASSWORD_MAX_BYTES:
        raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")
    # Stored hashes never come from longer input, so a longer candidate cannot match.
    if len(pw_bytes) > PASSWORD_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(user_id: str | int, expires_delta: timedelta | None = None) -> str:
    """Create a JWT access token with userId, iat and exp."""
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        USER_ID_CLAIM: str(user_id),
        "exp": now + expires_delta,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def verify_access_token(token: str) -> TokenPayload | TokenRejection:
    """
    Validate signature and expiry of a JWT.

    Returns TokenPayload on success or TokenRejection describing the failure;
    PyJWT errors never escape this function.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        return TokenRejection(TokenRejectionReason.EXPIRED, str(e))
    except jwt.InvalidSignatureError as e:
        return TokenRejection(TokenRejectionReason.BAD_SIGNATURE, str(e))
    except jwt.PyJWTError as e:
        return TokenRejection(TokenRejectionReason.MALFORMED, str(e))

    user_id = payload.get(USER_ID_CLAIM)
    if user_id is None or not str(user_id).strip():
        return TokenRejection(TokenRejectionReason.MALFORMED, f"missing {USER_ID_CLAIM} claim")
    return TokenPayload(user_id=str(user_id))
