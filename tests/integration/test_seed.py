"""Integration test for the customer seed script."""

from app.filters.customer import CustomerFilter
from app.repositories.customer_repository import CustomerRepository
from scripts.seed_customers import seed_customers


class TestSeedCustomers:
    """Seeding goes through the service layer and its code generator."""

    async def test_seed_assigns_codes(self, session_factory):
        async with session_factory() as session:
            await seed_customers(session)

        async with session_factory() as session:
            repo = CustomerRepository(session)
            for code in ("ABC001", "TES001", "QBF001", "BFC001", "TESTCO"):
                assert await repo.code_exists(code), code

    async def test_reseed_skips_explicit_codes(self, session_factory):
        async with session_factory() as session:
            await seed_customers(session)
        async with session_factory() as session:
            await seed_customers(session)

        async with session_factory() as session:
            repo = CustomerRepository(session)
            _, total = await repo.get_all(CustomerFilter())
            assert total == 9
            assert await repo.code_exists("TES002")
