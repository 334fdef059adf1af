"""Declarative filter for projects."""

from typing import Optional

from fastapi_filter.contrib.sqlalchemy import Filter

from app.models.project import Project


class ProjectFilter(Filter):
    """Query-param filter for the ``GET /projects`` endpoint."""

    code__ilike: Optional[str] = None
    name__ilike: Optional[str] = None
    customer_code: Optional[str] = None
    order_by: Optional[list[str]] = None

    class Constants(Filter.Constants):
        model = Project
