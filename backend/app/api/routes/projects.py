"""
Project management routes.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from typing import List, Optional
from app.core.config import settings
from app.models.project import Project
from app.models.user import User
from app.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse, ProjectDetailResponse
from app.services.project_service import ProjectService
from app.api.dependencies import get_current_actor, get_project_service

router = APIRouter(prefix="/projects", tags=["projects"])


def projects_path() -> str:
    return f"{settings.API_PREFIX}/projects"


def project_path(project_id: int) -> str:
    return f"{projects_path()}/{project_id}"


def see_other(path: str) -> RedirectResponse:
    return RedirectResponse(path, status_code=status.HTTP_303_SEE_OTHER)


def to_response(project: Project, service: ProjectService) -> ProjectResponse:
    response = ProjectResponse.model_validate(project)
    response.late = service.is_late(project)
    return response


@router.get("", response_model=List[ProjectResponse])
async def list_projects(
    actor: Optional[User] = Depends(get_current_actor),
    service: ProjectService = Depends(get_project_service)
):
    """List the current user's projects."""
    return [to_response(p, service) for p in service.list(actor)]


@router.post("", status_code=status.HTTP_303_SEE_OTHER)
async def create_project(
    project_data: ProjectCreate,
    actor: Optional[User] = Depends(get_current_actor),
    service: ProjectService = Depends(get_project_service)
):
    """Create a project and redirect to it."""
    project = service.create(actor, project_data.model_dump())
    return see_other(project_path(project.id))


@router.get("/{project_id}", response_model=ProjectDetailResponse)
async def get_project(
    project_id: int,
    actor: Optional[User] = Depends(get_current_actor),
    service: ProjectService = Depends(get_project_service)
):
    """Get project details with notes."""
    project = service.read(actor, project_id)
    detail = ProjectDetailResponse.model_validate(project)
    detail.late = service.is_late(project)
    return detail


@router.patch("/{project_id}", status_code=status.HTTP_303_SEE_OTHER)
async def update_project(
    project_id: int,
    project_data: ProjectUpdate,
    actor: Optional[User] = Depends(get_current_actor),
    service: ProjectService = Depends(get_project_service)
):
    """Update the fields that were sent and redirect to the project."""
    service.update(actor, project_id, project_data.model_dump(exclude_unset=True))
    return see_other(project_path(project_id))


@router.delete("/{project_id}", status_code=status.HTTP_303_SEE_OTHER)
async def delete_project(
    project_id: int,
    actor: Optional[User] = Depends(get_current_actor),
    service: ProjectService = Depends(get_project_service)
):
    """Delete a project with its notes and redirect to the list."""
    service.delete(actor, project_id)
    return see_other(projects_path())


@router.patch("/{project_id}/complete", status_code=status.HTTP_303_SEE_OTHER)
async def complete_project(
    project_id: int,
    actor: Optional[User] = Depends(get_current_actor),
    service: ProjectService = Depends(get_project_service)
):
    """Mark a project completed and redirect to it."""
    service.complete(actor, project_id)
    return see_other(project_path(project_id))
