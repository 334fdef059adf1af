"""Database models package."""

from app.models.base import Base
from app.models.customer import Customer
from app.models.project import Project
from app.models.vehicle import OwnerType, Vehicle
from app.models.vendor import Vendor

__all__ = [
    # Base
    "Base",
    # Models
    "Customer",
    "Vendor",
    "Vehicle",
    "Project",
    # Enums
    "OwnerType",
]
