"""Project endpoints. Writes and listing require a bearer token; read by id is open."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.common import MAX_ID, ApiResponse
from app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from app.services.resources import ProjectController

router = APIRouter()


def get_project_controller(db: Annotated[Session, Depends(get_db)]) -> ProjectController:
    return ProjectController(db)


Controller = Annotated[ProjectController, Depends(get_project_controller)]
Caller = Annotated[CurrentUser, Depends(get_current_user)]
ProjectId = Annotated[int, Path(gt=0, le=MAX_ID)]


@router.post(
    "/create-project",
    response_model=ApiResponse[ProjectRead],
    status_code=status.HTTP_201_CREATED,
)
def create_project(
    body: ProjectCreate,
    current_user: Caller,
    projects: Controller,
) -> ApiResponse[ProjectRead]:
    """Create a project owned by the caller. Any owner field in the body is ignored."""
    project = projects.create(current_user, body)
    return ApiResponse[ProjectRead](message="Project created successfully.", data=project)


@router.get("/get-projects", response_model=ApiResponse[list[ProjectRead]])
def get_projects(
    current_user: Caller,
    projects: Controller,
) -> ApiResponse[list[ProjectRead]]:
    """List the caller's projects; an empty list is a successful response."""
    items = projects.list_owned(current_user)
    return ApiResponse[list[ProjectRead]](message="Projects found successfully.", data=items)


@router.get("/get-project/{project_id}", response_model=ApiResponse[ProjectRead])
def get_project(
    project_id: ProjectId,
    projects: Controller,
) -> ApiResponse[ProjectRead]:
    """
    Fetch one project by id.

    Unauthenticated: any caller who knows the id can read the project.
    """
    project = projects.get(project_id)
    return ApiResponse[ProjectRead](message="Project found successfully.", data=project)


@router.put("/update-project/{project_id}", response_model=ApiResponse[ProjectRead])
def update_project(
    project_id: ProjectId,
    body: ProjectUpdate,
    current_user: Caller,
    projects: Controller,
) -> ApiResponse[ProjectRead]:
    """Partially update a project the caller owns (404 if missing, 401 if not the owner)."""
    project = projects.update(current_user, project_id, body)
    return ApiResponse[ProjectRead](message="Project updated successfully.", data=project)


@router.delete("/delete-project/{project_id}", response_model=ApiResponse[ProjectRead])
def delete_project(
    project_id: ProjectId,
    current_user: Caller,
    projects: Controller,
) -> ApiResponse[ProjectRead]:
    """Delete a project the caller owns and return the deleted project."""
    project = projects.delete(current_user, project_id)
    return ApiResponse[ProjectRead](message="Project deleted successfully.", data=project)
