"""Vehicle API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi_filter import FilterDepends

from app.api.v1.errors import code_generation_http_error, not_found
from app.core.errors import CodeGenerationError, DuplicateRegistrationError
from app.filters.vehicle import VehicleFilter
from app.providers import VehicleSvc
from app.schemas.common import CodeAvailabilityResponse, NextCodeResponse
from app.schemas.vehicle import (
    VehicleCreate,
    VehicleListResponse,
    VehicleResponse,
    VehicleUpdate,
)
from app.utils.audit import audit_logged

router = APIRouter()


@router.get("", response_model=VehicleListResponse)
async def list_vehicles(
    service: VehicleSvc,
    filters: VehicleFilter = FilterDepends(VehicleFilter),
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=100),
) -> VehicleListResponse:
    """List vehicles with optional filtering."""
    return await service.list_items(filters, page=page, size=size)


@router.get("/next-code", response_model=NextCodeResponse)
async def preview_vehicle_code(
    service: VehicleSvc,
    name: str = Query("", max_length=255),
) -> NextCodeResponse:
    """Preview the code a vehicle of make/model *name* would receive now."""
    try:
        return await service.next_code(name)
    except CodeGenerationError as exc:
        raise code_generation_http_error(exc)


@router.get("/check-code/{code}", response_model=CodeAvailabilityResponse)
async def check_vehicle_code(code: str, service: VehicleSvc) -> CodeAvailabilityResponse:
    """Check whether a vehicle code is still free."""
    return await service.check_code(code)


@router.get("/{code}", response_model=VehicleResponse)
async def get_vehicle(code: str, service: VehicleSvc) -> VehicleResponse:
    """Get a vehicle by code."""
    vehicle = await service.get(code)
    if vehicle is None:
        raise not_found("vehicle", code)
    return vehicle


@router.post(
    "",
    response_model=VehicleResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(audit_logged("create_vehicle"))],
)
async def create_vehicle(data: VehicleCreate, service: VehicleSvc) -> VehicleResponse:
    """Register a vehicle, generating its code unless one is supplied."""
    try:
        return await service.create(data)
    except DuplicateRegistrationError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    except CodeGenerationError as exc:
        raise code_generation_http_error(exc)


@router.put(
    "/{code}",
    response_model=VehicleResponse,
    dependencies=[Depends(audit_logged("update_vehicle"))],
)
async def update_vehicle(code: str, data: VehicleUpdate, service: VehicleSvc) -> VehicleResponse:
    """Update a vehicle. Code and registration number never change."""
    vehicle = await service.update(code, data)
    if vehicle is None:
        raise not_found("vehicle", code)
    return vehicle
