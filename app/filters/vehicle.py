"""Declarative filter for vehicles."""

from typing import Optional

from fastapi_filter.contrib.sqlalchemy import Filter

from app.models.vehicle import Vehicle


class VehicleFilter(Filter):
    """Query-param filter for the ``GET /vehicles`` endpoint."""

    code__ilike: Optional[str] = None
    name__ilike: Optional[str] = None
    registration_number: Optional[str] = None
    owner_type: Optional[str] = None
    vendor_code: Optional[str] = None
    order_by: Optional[list[str]] = None

    class Constants(Filter.Constants):
        model = Vehicle
