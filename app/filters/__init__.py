"""Declarative query filters (fastapi-filter)."""

from .customer import CustomerFilter
from .project import ProjectFilter
from .vehicle import VehicleFilter
from .vendor import VendorFilter

__all__ = ["CustomerFilter", "ProjectFilter", "VehicleFilter", "VendorFilter"]
