"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    SignUpRequest,
    UserSummary,
)
from app.schemas.common import ApiResponse, ErrorResponse
from app.schemas.health import HealthResponse
from app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from app.schemas.task import TaskCreate, TaskRead, TaskStatus, TaskUpdate

__all__ = [
    "ApiResponse",
    "AuthResponse",
    "CurrentUser",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "SignUpRequest",
    "TaskCreate",
    "TaskRead",
    "TaskStatus",
    "TaskUpdate",
    "UserSummary",
]
