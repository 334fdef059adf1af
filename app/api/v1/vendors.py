"""Vendor API endpoints."""

from fastapi import APIRouter, Depends, Query, status
from fastapi_filter import FilterDepends

from app.api.v1.errors import code_generation_http_error, not_found
from app.core.errors import CodeGenerationError
from app.filters.vendor import VendorFilter
from app.providers import VendorSvc
from app.schemas.common import CodeAvailabilityResponse, NextCodeResponse
from app.schemas.vendor import VendorCreate, VendorListResponse, VendorResponse, VendorUpdate
from app.utils.audit import audit_logged

router = APIRouter()


@router.get("", response_model=VendorListResponse)
async def list_vendors(
    service: VendorSvc,
    filters: VendorFilter = FilterDepends(VendorFilter),
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=100),
) -> VendorListResponse:
    """List vendors with optional filtering."""
    return await service.list_items(filters, page=page, size=size)


@router.get("/next-code", response_model=NextCodeResponse)
async def preview_vendor_code(service: VendorSvc) -> NextCodeResponse:
    """Preview the next vendor code."""
    try:
        return await service.next_code("")
    except CodeGenerationError as exc:
        raise code_generation_http_error(exc)


@router.get("/check-code/{code}", response_model=CodeAvailabilityResponse)
async def check_vendor_code(code: str, service: VendorSvc) -> CodeAvailabilityResponse:
    """Check whether a vendor code is still free."""
    return await service.check_code(code)


@router.get("/{code}", response_model=VendorResponse)
async def get_vendor(code: str, service: VendorSvc) -> VendorResponse:
    """Get a vendor by code."""
    vendor = await service.get(code)
    if vendor is None:
        raise not_found("vendor", code)
    return vendor


@router.post(
    "",
    response_model=VendorResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(audit_logged("create_vendor"))],
)
async def create_vendor(data: VendorCreate, service: VendorSvc) -> VendorResponse:
    """Create a vendor, generating its code unless one is supplied."""
    try:
        return await service.create(data)
    except CodeGenerationError as exc:
        raise code_generation_http_error(exc)


@router.put(
    "/{code}",
    response_model=VendorResponse,
    dependencies=[Depends(audit_logged("update_vendor"))],
)
async def update_vendor(code: str, data: VendorUpdate, service: VendorSvc) -> VendorResponse:
    """Update a vendor. The code never changes."""
    vendor = await service.update(code, data)
    if vendor is None:
        raise not_found("vendor", code)
    return vendor
