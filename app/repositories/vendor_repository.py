"""Repository for vendor data access."""

from app.models.vendor import Vendor
from app.repositories.base import CodedEntityRepository


class VendorRepository(CodedEntityRepository[Vendor]):
    """Data access layer for vendors."""

    model = Vendor
    entity = "vendor"
