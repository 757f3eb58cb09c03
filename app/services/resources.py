"""Ownership-scoped CRUD for projects and tasks.

Every mutating operation receives the resolved caller explicitly, loads the
target from the database, compares ownership through OwnerId and only then
writes. Reads by id are open (no caller required).
"""

import logging
from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.models import Project, Task
from app.schemas.auth import CurrentUser
from app.schemas.project import ProjectRead
from app.schemas.task import TaskRead, TaskStatus
from app.services.ownership import OwnerId, ensure_owner

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", Project, Task)

# Never taken from a request body, even if a schema were to let them through.
PROTECTED_FIELDS = frozenset({"id", "user_id", "created_at", "updated_at"})


class ResourceController(Generic[ModelT]):
    """CRUD for one user-owned model. Subclasses set model, read_schema and kind."""

    model: ClassVar[type]
    read_schema: ClassVar[type[BaseModel]]
    kind: ClassVar[str]

    def __init__(self, db: Session) -> None:
        self.db = db

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.kind.capitalize()} not found.")

    def _load(self, resource_id: int) -> ModelT:
        obj = self.db.get(self.model, resource_id)
        if obj is None:
            raise self._not_found()
        return obj

    def _load_owned(self, user: CurrentUser, resource_id: int, action: str) -> ModelT:
        obj = self._load(resource_id)
        ensure_owner(OwnerId.of(user.id), obj, action, self.kind)
        return obj

    def _to_read(self, obj: ModelT) -> BaseModel:
        return self.read_schema.model_validate(obj)

    def _create_fields(self, payload: BaseModel) -> dict[str, Any]:
        """Column values for a new row, taken from the validated payload."""
        return {
            k: v
            for k, v in payload.model_dump(mode="json").items()
            if k not in PROTECTED_FIELDS
        }

    def _apply_changes(self, obj: ModelT, changes: dict[str, Any]) -> None:
        for field, value in changes.items():
            setattr(obj, field, value)

    def create(self, user: CurrentUser, payload: BaseModel) -> BaseModel:
        fields = self._create_fields(payload)
        obj = self.model(**fields, user_id=user.id)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        logger.info(
            "Created %s id=%s", self.kind, obj.id, extra={"kind": self.kind, "owner_id": user.id}
        )
        return self._to_read(obj)

    def list_owned(self, user: CurrentUser) -> list[BaseModel]:
        """All rows owned by user; an empty list is a normal result."""
        rows = (
            self.db.query(self.model)
            .filter(self.model.user_id == user.id)
            .order_by(self.model.id)
            .all()
        )
        return [self._to_read(row) for row in rows]

    def get(self, resource_id: int) -> BaseModel:
        return self._to_read(self._load(resource_id))

    def update(self, user: CurrentUser, resource_id: int, payload: BaseModel) -> BaseModel:
        """Overwrite only the fields present in payload; ownership is never changed."""
        obj = self._load_owned(user, resource_id, "update")
        changes = {
            k: v
            for k, v in payload.model_dump(mode="json", exclude_unset=True, exclude_none=True).items()
            if k not in PROTECTED_FIELDS
        }
        if changes:
            self._apply_changes(obj, changes)
            self.db.commit()
            self.db.refresh(obj)
        return self._to_read(obj)

    def delete(self, user: CurrentUser, resource_id: int) -> BaseModel:
        """Remove the row and return its last state."""
        obj = self._load_owned(user, resource_id, "delete")
        snapshot = self._to_read(obj)
        self.db.delete(obj)
        self.db.commit()
        logger.info(
            "Deleted %s id=%s", self.kind, resource_id, extra={"kind": self.kind, "owner_id": user.id}
        )
        return snapshot


class ProjectController(ResourceController[Project]):
    model = Project
    read_schema = ProjectRead
    kind = "project"


class TaskController(ResourceController[Task]):
    """
    Tasks reference a project but are authorized on their own user_id.

    completed_at follows status: set when a task becomes completed, cleared
    when it moves back to todo or in-progress.
    """

    model = Task
    read_schema = TaskRead
    kind = "task"

    def _create_fields(self, payload: BaseModel) -> dict[str, Any]:
        fields = super()._create_fields(payload)
        if self.db.get(Project, fields["project_id"]) is None:
            raise NotFoundError("Project not found.")
        if fields.get("status") == TaskStatus.COMPLETED.value:
            fields["completed_at"] = datetime.now(UTC)
        return fields

    def _apply_changes(self, obj: Task, changes: dict[str, Any]) -> None:
        previous_status = obj.status
        super()._apply_changes(obj, changes)
        if "status" not in changes:
            return
        if obj.status == TaskStatus.COMPLETED.value:
            if previous_status != TaskStatus.COMPLETED.value or obj.completed_at is None:
                obj.completed_at = datetime.now(UTC)
        else:
            obj.completed_at = None
