"""Task endpoints. Writes and listing require a bearer token; read by id is open."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.common import MAX_ID, ApiResponse
from app.schemas.task import TaskCreate, TaskRead, TaskUpdate
from app.services.resources import TaskController

router = APIRouter()


def get_task_controller(db: Annotated[Session, Depends(get_db)]) -> TaskController:
    return TaskController(db)


Controller = Annotated[TaskController, Depends(get_task_controller)]
Caller = Annotated[CurrentUser, Depends(get_current_user)]
TaskId = Annotated[int, Path(gt=0, le=MAX_ID)]


@router.post(
    "/create-task",
    response_model=ApiResponse[TaskRead],
    status_code=status.HTTP_201_CREATED,
)
def create_task(
    body: TaskCreate,
    current_user: Caller,
    tasks: Controller,
) -> ApiResponse[TaskRead]:
    """
    Create a task in a project, owned by the caller.

    The project must exist; whether the caller owns that project is not checked.
    """
    task = tasks.create(current_user, body)
    return ApiResponse[TaskRead](message="Task created successfully.", data=task)


@router.get("/get-tasks", response_model=ApiResponse[list[TaskRead]])
def get_tasks(
    current_user: Caller,
    tasks: Controller,
) -> ApiResponse[list[TaskRead]]:
    items = tasks.list_owned(current_user)
    return ApiResponse[list[TaskRead]](message="Tasks found successfully.", data=items)


@router.get("/get-task/{task_id}", response_model=ApiResponse[TaskRead])
def get_task(
    task_id: TaskId,
    tasks: Controller,
) -> ApiResponse[TaskRead]:
    """Fetch one task by id. Unauthenticated, like get-project."""
    task = tasks.get(task_id)
    return ApiResponse[TaskRead](message="Task found successfully.", data=task)


@router.put("/update-tasks/{task_id}", response_model=ApiResponse[TaskRead])
def update_task(
    task_id: TaskId,
    body: TaskUpdate,
    current_user: Caller,
    tasks: Controller,
) -> ApiResponse[TaskRead]:
    task = tasks.update(current_user, task_id, body)
    return ApiResponse[TaskRead](message="Task updated successfully.", data=task)


@router.delete("/delete-tasks/{task_id}", response_model=ApiResponse[TaskRead])
def delete_task(
    task_id: TaskId,
    current_user: Caller,
    tasks: Controller,
) -> ApiResponse[TaskRead]:
    task = tasks.delete(current_user, task_id)
    return ApiResponse[TaskRead](message="Task deleted successfully.", data=task)
