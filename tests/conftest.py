"""Shared test fixtures for the entity code service."""

import os

# Configure settings before any app imports trigger Settings() creation.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_DEFAULT", "10000/minute")
os.environ.setdefault("LOG_FORMAT", "console")

from collections.abc import AsyncGenerator  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from types import SimpleNamespace  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker  # noqa: E402

from app.config import Settings  # noqa: E402
from app.dependencies import create_engine, create_session_factory  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Base  # noqa: E402

# ---------------------------------------------------------------------------
# SQLite database (one file per test)
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Async engine on a fresh SQLite file with all tables created."""
    test_engine = create_engine(Settings(database_url=f"sqlite:///{tmp_path / 'test.db'}"))
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture()
async def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest_asyncio.fixture()
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A session whose work is rolled back after the test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


# ---------------------------------------------------------------------------
# HTTP client fixture (FastAPI app on the SQLite database)
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def client(engine, session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the FastAPI app.

    The lifespan does not run under ASGITransport, so the database
    resources it would create are placed on ``app.state`` directly.
    """
    app.state.engine = engine
    app.state.session_factory = session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Mock ORM model factories
# ---------------------------------------------------------------------------

_NOW = datetime.now(UTC)


def _make_customer_model(**overrides):
    """Return a SimpleNamespace that looks like a Customer ORM instance."""
    data = {
        "id": 1,
        "code": "TES001",
        "name": "Test Company",
        "mobile_number": None,
        "email": None,
        "contact_person": None,
        "gst_number": None,
        "city": None,
        "state": None,
        "created_at": _NOW,
        "updated_at": _NOW,
    }
    data.update(overrides)
    return SimpleNamespace(**data)


def _make_vehicle_model(**overrides):
    """Return a SimpleNamespace that looks like a Vehicle ORM instance."""
    data = {
        "id": 1,
        "code": "TAT001",
        "name": "Tata",
        "registration_number": "MH12AB1234",
        "vehicle_type": "truck",
        "owner_type": "vendor",
        "vendor_code": None,
        "created_at": _NOW,
        "updated_at": _NOW,
    }
    data.update(overrides)
    return SimpleNamespace(**data)


# ---------------------------------------------------------------------------
# Factory helpers (payload dicts for HTTP requests)
# ---------------------------------------------------------------------------


def make_customer_payload(**overrides) -> dict:
    """Build a valid customer creation payload."""
    data = {
        "name": "Test Company",
        "mobile_number": "9876543210",
        "email": "ops@testcompany.in",
        "city": "Pune",
        "state": "Maharashtra",
    }
    data.update(overrides)
    return data


def make_vendor_payload(**overrides) -> dict:
    """Build a valid vendor creation payload."""
    data = {
        "name": "Sharma Transport",
        "mobile_number": "9123456780",
        "address": "Nashik",
    }
    data.update(overrides)
    return data


def make_vehicle_payload(**overrides) -> dict:
    """Build a valid vehicle registration payload."""
    data = {
        "name": "Tata",
        "registration_number": "MH 12 AB 1234",
        "vehicle_type": "truck",
        "owner_type": "vendor",
    }
    data.update(overrides)
    return data
