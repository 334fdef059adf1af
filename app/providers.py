"""FastAPI dependency providers for repositories, code generators and services.

Separated from ``dependencies.py`` so route modules import type aliases
from one place without pulling in engine construction.
"""

from typing import Annotated

from fastapi import Depends

from app.config import Settings
from app.core.code_generator import CodeGenerator
from app.core.code_schemes import CodeScheme, EntityType, build_schemes
from app.dependencies import AppSettings, DBSession
from app.repositories.base import CodedEntityRepository
from app.repositories.customer_repository import CustomerRepository
from app.repositories.project_repository import ProjectRepository
from app.repositories.vehicle_repository import VehicleRepository
from app.repositories.vendor_repository import VendorRepository
from app.services.customer_service import CustomerService
from app.services.project_service import ProjectService
from app.services.vehicle_service import VehicleService
from app.services.vendor_service import VendorService


def make_code_generator(
    repo: CodedEntityRepository, entity: EntityType, settings: Settings
) -> CodeGenerator:
    """Build a generator for *entity* that reads codes through *repo*."""
    scheme: CodeScheme = build_schemes(settings)[entity]
    return CodeGenerator(repo, scheme, max_attempts=settings.code_max_attempts)


# ---------------------------------------------------------------------------
# Repository providers
# ---------------------------------------------------------------------------


def get_customer_repository(db: DBSession) -> CustomerRepository:
    return CustomerRepository(db)


def get_vendor_repository(db: DBSession) -> VendorRepository:
    return VendorRepository(db)


def get_vehicle_repository(db: DBSession) -> VehicleRepository:
    return VehicleRepository(db)


def get_project_repository(db: DBSession) -> ProjectRepository:
    return ProjectRepository(db)


CustomerRepo = Annotated[CustomerRepository, Depends(get_customer_repository)]
VendorRepo = Annotated[VendorRepository, Depends(get_vendor_repository)]
VehicleRepo = Annotated[VehicleRepository, Depends(get_vehicle_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]

# ---------------------------------------------------------------------------
# Service providers
# ---------------------------------------------------------------------------


def get_customer_service(repo: CustomerRepo, settings: AppSettings) -> CustomerService:
    return CustomerService(repo, make_code_generator(repo, EntityType.CUSTOMER, settings))


def get_vendor_service(repo: VendorRepo, settings: AppSettings) -> VendorService:
    return VendorService(repo, make_code_generator(repo, EntityType.VENDOR, settings))


def get_vehicle_service(repo: VehicleRepo, settings: AppSettings) -> VehicleService:
    return VehicleService(repo, make_code_generator(repo, EntityType.VEHICLE, settings))


def get_project_service(
    repo: ProjectRepo, customers: CustomerRepo, settings: AppSettings
) -> ProjectService:
    return ProjectService(
        repo, make_code_generator(repo, EntityType.PROJECT, settings), customers
    )


CustomerSvc = Annotated[CustomerService, Depends(get_customer_service)]
VendorSvc = Annotated[VendorService, Depends(get_vendor_service)]
VehicleSvc = Annotated[VehicleService, Depends(get_vehicle_service)]
ProjectSvc = Annotated[ProjectService, Depends(get_project_service)]
