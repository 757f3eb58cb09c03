"""Account sign-up and login."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import AuthenticationError, ConflictError
from app.core.security import create_access_token, verify_password
from app.models import User
from app.schemas.auth import LoginRequest, SignUpRequest

logger = logging.getLogger(__name__)

USER_EXISTS = "User already exists"
UNKNOWN_USER = "User does not exist or invalid credentials."
BAD_PASSWORD = "Invalid credentials."


def find_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def create_user(db: Session, payload: SignUpRequest) -> User:
    """
    Persist a new user with a hashed password.

    The hash is computed when User.password is assigned, before the row is added
    to the session; a hashing failure therefore leaves nothing to commit.
    Raises ConflictError if the email is taken (checked first, and again via the
    unique index for concurrent sign-ups).
    """
    if find_user_by_email(db, payload.email) is not None:
        raise ConflictError(USER_EXISTS)
    user = User(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        country=payload.country,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(USER_EXISTS) from e
    db.refresh(user)
    return user


def register(db: Session, payload: SignUpRequest) -> tuple[User, str]:
    """Create the account and issue its first token."""
    user = create_user(db, payload)
    logger.info("User signed up id=%s", user.id, extra={"user_id": user.id})
    return user, create_access_token(user.id)


def authenticate(db: Session, payload: LoginRequest) -> tuple[User, str]:
    """Check email and password; return the user and a fresh token."""
    user = find_user_by_email(db, payload.email)
    if user is None:
        logger.info("Login failed: unknown email")
        raise AuthenticationError(UNKNOWN_USER)
    if not verify_password(payload.password, user.password_hash):
        logger.info("Login failed: bad password", extra={"user_id": user.id})
        raise AuthenticationError(BAD_PASSWORD)
    return user, create_access_token(user.id)
