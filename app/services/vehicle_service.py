"""Service layer for vehicle management."""

from app.core.errors import DuplicateRegistrationError
from app.repositories.vehicle_repository import VehicleRepository
from app.schemas.vehicle import VehicleCreate, VehicleListResponse, VehicleResponse
from app.services.base import CodedEntityService


class VehicleService(CodedEntityService):
    """Vehicles are coded from an abbreviation of their make/model."""

    response_model = VehicleResponse
    list_model = VehicleListResponse

    _repo: VehicleRepository

    async def create(self, data: VehicleCreate) -> VehicleResponse:
        """Register a vehicle.

        Raises:
            DuplicateRegistrationError: If the registration number is taken,
                including by a concurrent registration that wins the insert.
        """
        if await self._repo.registration_exists(data.registration_number):
            raise DuplicateRegistrationError(data.registration_number)
        fields = data.model_dump(exclude={"code"})
        return await self._create(data.code, data.name, fields)
