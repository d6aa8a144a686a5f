"""
Color Picker API - Project Route Handlers
===========================================

What:  CRUD endpoints for projects under /api/v1/projects, addressed by name.
How:   Reads the path/body, checks required fields, delegates to
       ProjectService, and shapes the JSON response and status code.

Endpoints:
    GET    /api/v1/projects          200 all projects
    GET    /api/v1/projects/{name}   200 project | 404
    POST   /api/v1/projects          201 created project | 422
    PATCH  /api/v1/projects/{name}   202 message | 404 | 422
    DELETE /api/v1/projects/{name}   202 message
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from colorpicker.database import get_db_session
from colorpicker.exceptions import NotFoundError
from colorpicker.schemas.common import ErrorResponse, MessageResponse
from colorpicker.schemas.project import ProjectResponse
from colorpicker.services.project_service import project_service
from colorpicker.services.validation import read_json_object, require_fields

router = APIRouter(prefix="/api/v1/projects", tags=["Projects"])

MISSING_NAME_MESSAGE = "Expected format {{ name: <string> }}, missing {field}!"


@router.get(
    "",
    response_model=List[ProjectResponse],
    summary="List all projects",
)
async def get_projects(
    db: AsyncSession = Depends(get_db_session),
) -> List[ProjectResponse]:
    """Every project, in insertion order."""
    projects = await project_service.find_all(db)
    return [ProjectResponse.model_validate(p) for p in projects]


@router.get(
    "/{name}",
    response_model=ProjectResponse,
    responses={404: {"description": "Project not found", "model": ErrorResponse}},
    summary="Get a project by name",
)
async def get_project(
    name: str,
    db: AsyncSession = Depends(get_db_session),
) -> ProjectResponse:
    project = await project_service.find_by_key(db, name)
    if project is None:
        raise NotFoundError(
            message=f"Could not find project named {name}!",
            resource="project",
            key=name,
        )
    return ProjectResponse.model_validate(project)


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"description": "Missing name", "model": ErrorResponse}},
    summary="Create a project",
    description="Body: `{ \"name\": <string> }`. Names are unique; duplicates fail at the store.",
)
async def create_project(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> ProjectResponse:
    require_fields(payload, project_service.required_fields, MISSING_NAME_MESSAGE)
    project = await project_service.insert(db, payload)
    return ProjectResponse.model_validate(project)


@router.patch(
    "/{name}",
    response_model=MessageResponse,
    status_code=status.HTTP_202_ACCEPTED,
    responses={
        404: {"description": "Project not found", "model": ErrorResponse},
        422: {"description": "Missing name", "model": ErrorResponse},
    },
    summary="Rename a project",
)
async def update_project(
    name: str,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """
    Rename the project called `name` to `payload["name"]`.

    The lookup runs before body validation, so a PATCH against an unknown
    project is a 404 even when the body is empty or malformed.
    """
    if await project_service.find_by_key(db, name) is None:
        raise NotFoundError(
            message=f"No existing project with name of {name}",
            resource="project",
            key=name,
        )
    payload = await read_json_object(request)
    require_fields(payload, project_service.required_fields, MISSING_NAME_MESSAGE)

    await project_service.update_by_key(db, name, payload)
    return MessageResponse(message=f"Project name changed to {payload['name']}")


@router.delete(
    "/{name}",
    response_model=MessageResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Delete a project",
    description="Always answers 202, whether or not a project with that name existed.",
)
async def delete_project(
    name: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await project_service.delete_by_key(db, name)
    return MessageResponse(message=f"Successfully deleted {name}")
