"""Database repositories for data access."""
from app.repositories.customer_repository import CustomerRepository
from app.repositories.project_repository import ProjectRepository
from app.repositories.vehicle_repository import VehicleRepository
from app.repositories.vendor_repository import VendorRepository

__all__ = [
    "CustomerRepository",
    "VendorRepository",
    "VehicleRepository",
    "ProjectRepository",
]
