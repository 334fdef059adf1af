"""Service layer for vendor management."""

from app.schemas.vendor import VendorCreate, VendorListResponse, VendorResponse
from app.services.base import CodedEntityService


class VendorService(CodedEntityService):
    """Vendors share one fixed prefix (``VEND001``, ``VEND002``, ...)."""

    response_model = VendorResponse
    list_model = VendorListResponse

    async def create(self, data: VendorCreate) -> VendorResponse:
        fields = data.model_dump(exclude={"code"})
        return await self._create(data.code, data.name, fields)
