"""Customer API endpoints."""

from fastapi import APIRouter, Depends, Query, status
from fastapi_filter import FilterDepends

from app.api.v1.errors import code_generation_http_error, not_found
from app.core.errors import CodeGenerationError
from app.filters.customer import CustomerFilter
from app.providers import CustomerSvc
from app.schemas.common import CodeAvailabilityResponse, NextCodeResponse
from app.schemas.customer import (
    CustomerCreate,
    CustomerListResponse,
    CustomerResponse,
    CustomerUpdate,
)
from app.utils.audit import audit_logged

router = APIRouter()


@router.get("", response_model=CustomerListResponse)
async def list_customers(
    service: CustomerSvc,
    filters: CustomerFilter = FilterDepends(CustomerFilter),
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=100),
) -> CustomerListResponse:
    """
    List customers with optional filtering.

    - **code__ilike** / **name__ilike**: substring match
    - **order_by**: Sort fields (e.g. ``name``, ``-created_at``)
    """
    return await service.list_items(filters, page=page, size=size)


@router.get("/next-code", response_model=NextCodeResponse)
async def preview_customer_code(
    service: CustomerSvc,
    name: str = Query("", max_length=255),
) -> NextCodeResponse:
    """Preview the code a customer called *name* would receive now."""
    try:
        return await service.next_code(name)
    except CodeGenerationError as exc:
        raise code_generation_http_error(exc)


@router.get("/check-code/{code}", response_model=CodeAvailabilityResponse)
async def check_customer_code(code: str, service: CustomerSvc) -> CodeAvailabilityResponse:
    """Check whether a customer code is still free."""
    return await service.check_code(code)


@router.get("/{code}", response_model=CustomerResponse)
async def get_customer(code: str, service: CustomerSvc) -> CustomerResponse:
    """Get a customer by code."""
    customer = await service.get(code)
    if customer is None:
        raise not_found("customer", code)
    return customer


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(audit_logged("create_customer"))],
)
async def create_customer(data: CustomerCreate, service: CustomerSvc) -> CustomerResponse:
    """Create a customer, generating its code unless one is supplied."""
    try:
        return await service.create(data)
    except CodeGenerationError as exc:
        raise code_generation_http_error(exc)


@router.put(
    "/{code}",
    response_model=CustomerResponse,
    dependencies=[Depends(audit_logged("update_customer"))],
)
async def update_customer(
    code: str,
    data: CustomerUpdate,
    service: CustomerSvc,
) -> CustomerResponse:
    """Update a customer. The code is kept even if the name changes."""
    customer = await service.update(code, data)
    if customer is None:
        raise not_found("customer", code)
    return customer
