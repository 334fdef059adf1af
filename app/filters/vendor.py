"""Declarative filter for vendors."""

from typing import Optional

from fastapi_filter.contrib.sqlalchemy import Filter

from app.models.vendor import Vendor


class VendorFilter(Filter):
    """Query-param filter for the ``GET /vendors`` endpoint."""

    code__ilike: Optional[str] = None
    name__ilike: Optional[str] = None
    order_by: Optional[list[str]] = None

    class Constants(Filter.Constants):
        model = Vendor
