"""Sign-up, login, current user, and the bearer-token dependency (get_current_user)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import AuthenticationError
from app.core.security import TokenRejection, TokenRejectionReason, verify_access_token
from app.models.user import User
from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    SignUpRequest,
    UserSummary,
)
from app.schemas.common import ApiResponse
from app.services import accounts

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)

NOT_AUTHORIZED = "Not authorized"
INVALID_TOKEN = "Unauthorized: invalid or expired token."
NO_SUCH_USER = "Unauthorized: No user found with that token."


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT for an existing user and return that user.

    Runs before the route body, so no project/task I/O happens for rejected
    callers. All token failures map to the same 401; the reason is only logged.
    """
    if credentials is None or not credentials.credentials.strip():
        raise AuthenticationError(NOT_AUTHORIZED)

    result = verify_access_token(credentials.credentials)
    if isinstance(result, TokenRejection):
        logger.warning(
            "Rejected bearer token: %s",
            result.reason.value,
            extra={"reason": result.reason.value},
        )
        raise AuthenticationError(INVALID_TOKEN)

    try:
        user_id = int(result.user_id)
    except ValueError:
        logger.warning(
            "Rejected bearer token: %s",
            TokenRejectionReason.MALFORMED.value,
            extra={"reason": TokenRejectionReason.MALFORMED.value},
        )
        raise AuthenticationError(INVALID_TOKEN)

    # Tokens outlive deleted users; this lookup is what catches that.
    user = db.get(User, user_id)
    if user is None:
        logger.warning("Bearer token for unknown user id=%s", user_id)
        raise AuthenticationError(NO_SUCH_USER)
    return CurrentUser.model_validate(user)


@router.post("/sign-up", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def sign_up(
    body: SignUpRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Create an account and return a JWT access token with the user summary.
    Include the token in the Authorization header as: Bearer <token>
    """
    user, token = accounts.register(db, body)
    return AuthResponse(
        message="User created successfully.",
        token=token,
        data=UserSummary.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Authenticate with email and password; returns a JWT access token."""
    user, token = accounts.authenticate(db, body)
    return AuthResponse(
        message="User logged in successfully.",
        token=token,
        data=UserSummary.model_validate(user),
    )


@router.get("/getMe", response_model=ApiResponse[CurrentUser])
def get_me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> ApiResponse[CurrentUser]:
    """Return the full record of the authenticated user (never the password hash)."""
    return ApiResponse[CurrentUser](message="User found successfully.", data=current_user)
