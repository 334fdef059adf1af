"""Service layer for customer projects."""

from app.core.code_generator import CodeGenerator
from app.repositories.customer_repository import CustomerRepository
from app.repositories.project_repository import ProjectRepository
from app.schemas.common import NextCodeResponse
from app.schemas.project import ProjectCreate, ProjectListResponse, ProjectResponse
from app.services.base import CodedEntityService


class CustomerNotFoundError(Exception):
    """Raised when a project references an unknown customer code."""

    def __init__(self, customer_code: str):
        self.customer_code = customer_code
        super().__init__(f"Customer with code '{customer_code}' not found")


class ProjectService(CodedEntityService):
    """Projects are coded under their customer's code (``TES001-WAR001``)."""

    response_model = ProjectResponse
    list_model = ProjectListResponse

    def __init__(
        self,
        repo: ProjectRepository,
        generator: CodeGenerator,
        customers: CustomerRepository,
    ):
        super().__init__(repo, generator)
        self._customers = customers

    async def _require_customer(self, customer_code: str):
        customer = await self._customers.get_by_code(customer_code)
        if customer is None:
            raise CustomerNotFoundError(customer_code)
        return customer

    async def create(self, data: ProjectCreate) -> ProjectResponse:
        """Create a project for an existing customer.

        Raises:
            CustomerNotFoundError: If ``customer_code`` is unknown.
        """
        customer = await self._require_customer(data.customer_code)
        fields = {
            "name": data.name,
            "description": data.description,
            "customer_id": customer.id,
            "customer_code": customer.code,
        }
        return await self._create(data.code, data.name, fields, parent_code=customer.code)

    async def preview_code(self, name: str, customer_code: str) -> NextCodeResponse:
        customer = await self._require_customer(customer_code)
        return await self.next_code(name, parent_code=customer.code)
