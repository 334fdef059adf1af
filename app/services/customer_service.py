"""Service layer for customer management."""

from app.schemas.customer import CustomerCreate, CustomerListResponse, CustomerResponse
from app.services.base import CodedEntityService


class CustomerService(CodedEntityService):
    """Customers are coded from an abbreviation of their name (``TES001``)."""

    response_model = CustomerResponse
    list_model = CustomerListResponse

    async def create(self, data: CustomerCreate) -> CustomerResponse:
        fields = data.model_dump(exclude={"code"})
        return await self._create(data.code, data.name, fields)
