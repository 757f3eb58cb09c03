"""Request/response schemas for task endpoints."""

from datetime import datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.schemas.common import MAX_ID


class TaskStatus(str, Enum):
    """Allowed task states (mirrors app.models.task.TASK_STATUSES)."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskCreate(BaseModel):
    """Fields accepted when creating a task. Ownership comes from the token, never the body."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    status: TaskStatus = TaskStatus.TODO
    project_id: int = Field(
        ...,
        gt=0,
        le=MAX_ID,
        validation_alias=AliasChoices("project_id", "projectId"),
        description="Project the task belongs to",
    )


class TaskUpdate(BaseModel):
    """Partial update; only fields present in the body are changed."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    status: TaskStatus | None = None


class TaskRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    status: TaskStatus
    project_id: int
    user_id: int
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
