"""Repository for customer data access."""

from app.models.customer import Customer
from app.repositories.base import CodedEntityRepository


class CustomerRepository(CodedEntityRepository[Customer]):
    """Data access layer for customers."""

    model = Customer
    entity = "customer"
