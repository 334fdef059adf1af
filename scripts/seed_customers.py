"""Seed customers from YAML, generating codes for entries without one."""
import asyncio
import sys
from pathlib import Path

import yaml
from sqlalchemy.ext.asyncio import AsyncSession

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import get_settings
from app.core.code_schemes import EntityType
from app.core.errors import DuplicateCodeError
from app.dependencies import create_engine, create_session_factory
from app.providers import make_code_generator
from app.repositories.customer_repository import CustomerRepository
from app.schemas.customer import CustomerCreate
from app.services.customer_service import CustomerService
from app.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


async def seed_customers(session: AsyncSession) -> None:
    """Load customers from YAML and create them through the service layer."""
    data_path = Path(__file__).parent / "data" / "customers.yaml"

    if not data_path.exists():
        logger.warning("seed_file_missing", path=str(data_path))
        return

    with open(data_path) as f:
        data = yaml.safe_load(f)

    settings = get_settings()
    repo = CustomerRepository(session)
    service = CustomerService(repo, make_code_generator(repo, EntityType.CUSTOMER, settings))

    inserted = 0
    skipped = 0

    for entry in data.get("customers", []):
        try:
            customer = await service.create(CustomerCreate(**entry))
        except DuplicateCodeError as exc:
            logger.info("customer_skipped", code=exc.code)
            skipped += 1
            continue
        logger.info("customer_inserted", code=customer.code, name=customer.name)
        inserted += 1

    await session.commit()
    logger.info("seed_complete", inserted=inserted, skipped=skipped)


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "console")
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)

    try:
        async with session_factory() as session:
            await seed_customers(session)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
