"""Project API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi_filter import FilterDepends

from app.api.v1.errors import code_generation_http_error, not_found
from app.core.errors import CodeGenerationError
from app.filters.project import ProjectFilter
from app.providers import ProjectSvc
from app.schemas.common import CodeAvailabilityResponse, NextCodeResponse
from app.schemas.project import (
    ProjectCreate,
    ProjectListResponse,
    ProjectResponse,
    ProjectUpdate,
)
from app.services.project_service import CustomerNotFoundError
from app.utils.audit import audit_logged

router = APIRouter()


@router.get("", response_model=ProjectListResponse)
async def list_projects(
    service: ProjectSvc,
    filters: ProjectFilter = FilterDepends(ProjectFilter),
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=100),
) -> ProjectListResponse:
    """List projects, optionally for one ``customer_code``."""
    return await service.list_items(filters, page=page, size=size)


@router.get("/next-code", response_model=NextCodeResponse)
async def preview_project_code(
    service: ProjectSvc,
    customer_code: str = Query(..., min_length=1),
    name: str = Query("", max_length=255),
) -> NextCodeResponse:
    """Preview the code a project called *name* would receive now."""
    try:
        return await service.preview_code(name, customer_code.strip().upper())
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except CodeGenerationError as exc:
        raise code_generation_http_error(exc)


@router.get("/check-code/{code}", response_model=CodeAvailabilityResponse)
async def check_project_code(code: str, service: ProjectSvc) -> CodeAvailabilityResponse:
    """Check whether a project code is still free."""
    return await service.check_code(code)


@router.get("/{code}", response_model=ProjectResponse)
async def get_project(code: str, service: ProjectSvc) -> ProjectResponse:
    """Get a project by code."""
    project = await service.get(code)
    if project is None:
        raise not_found("project", code)
    return project


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(audit_logged("create_project"))],
)
async def create_project(data: ProjectCreate, service: ProjectSvc) -> ProjectResponse:
    """Create a project under an existing customer."""
    try:
        return await service.create(data)
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except CodeGenerationError as exc:
        raise code_generation_http_error(exc)


@router.put(
    "/{code}",
    response_model=ProjectResponse,
    dependencies=[Depends(audit_logged("update_project"))],
)
async def update_project(code: str, data: ProjectUpdate, service: ProjectSvc) -> ProjectResponse:
    """Update a project. Code and customer never change."""
    project = await service.update(code, data)
    if project is None:
        raise not_found("project", code)
    return project
