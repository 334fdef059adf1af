"""Declarative filter for customers."""

from typing import Optional

from fastapi_filter.contrib.sqlalchemy import Filter

from app.models.customer import Customer


class CustomerFilter(Filter):
    """Query-param filter for the ``GET /customers`` endpoint."""

    code__ilike: Optional[str] = None
    name__ilike: Optional[str] = None
    city: Optional[str] = None
    order_by: Optional[list[str]] = None

    class Constants(Filter.Constants):
        model = Customer
