"""Repository for vehicle data access."""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from app.core.errors import DuplicateRegistrationError
from app.models.vehicle import Vehicle
from app.repositories.base import CodedEntityRepository


class VehicleRepository(CodedEntityRepository[Vehicle]):
    """Data access layer for vehicles."""

    model = Vehicle
    entity = "vehicle"

    async def registration_exists(self, registration_number: str) -> bool:
        """Check whether a vehicle with *registration_number* is registered."""
        query = (
            select(func.count())
            .select_from(Vehicle)
            .where(Vehicle.registration_number == registration_number)
        )
        return (await self.session.scalar(query) or 0) > 0

    async def create(self, code: str, **fields: Any) -> Vehicle:
        """Insert a vehicle under *code*.

        Raises:
            CodeConflictError: If *code* is already assigned.
            DuplicateRegistrationError: If the registration number is taken.
        """
        try:
            return await super().create(code, **fields)
        except IntegrityError:
            registration = fields.get("registration_number")
            if registration and await self.registration_exists(registration):
                raise DuplicateRegistrationError(registration) from None
            raise
