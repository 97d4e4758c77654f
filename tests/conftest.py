"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

import sitewatch.models  # noqa: F401
from sitewatch.core.database import Base, create_engine_for_url, get_session
from sitewatch.main import create_app
from sitewatch.schemas import SiteBundleCreate, SiteCreate
from sitewatch.services import SiteService

# Use in-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def make_site_data(**overrides) -> dict:
    """Plain site fields as the API receives them (camelCase)."""
    data = {
        "name": "HQ - New York",
        "region": "North America",
        "city": "New York",
        "address": "1 World Trade Center, NY",
        "lat": 40.7128,
        "lng": -74.006,
        "routerIp": "10.0.0.1",
        "routerMac": "00:1A:2B:3C:4D:5E",
        "routerModel": "Cisco ISR 4451",
    }
    data.update(overrides)
    return data


def make_device_data(name: str, ip: str, mac: str, model: str = "Generic", **extra) -> dict:
    """Switch or access point fields (camelCase)."""
    return {"name": name, "ip": ip, "mac": mac, "model": model, **extra}


@pytest.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for each test."""
    engine = create_engine_for_url(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Get a test database session.

    Each test gets a fresh session that is rolled back after the test.
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Get an async test client with the request session bound to the test database."""
    app = create_app()

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def seeded_site(session_factory) -> dict:
    """A committed site with two switches and three access points.

    Returns the generated ids keyed by role.
    """
    async with session_factory() as session:
        service = SiteService(session)
        site = await service.create_with_devices(
            SiteBundleCreate.model_validate(
                {
                    "site": make_site_data(),
                    "switches": [
                        make_device_data("Core Switch 01", "10.0.0.2", "00:1A:2B:3C:4D:5F"),
                        make_device_data("Access Switch 01", "10.0.0.3", "00:1A:2B:3C:4D:60"),
                    ],
                    "accessPoints": [
                        make_device_data("AP-Lobby-01", "10.0.0.101", "AA:BB:CC:00:00:01", switchIndex=0),
                        make_device_data("AP-Lobby-02", "10.0.0.102", "AA:BB:CC:00:00:02", switchIndex=0),
                        make_device_data("AP-Office-24A", "10.0.0.103", "AA:BB:CC:00:00:03", switchIndex=1),
                    ],
                }
            )
        )
        other = await service.create(
            SiteCreate.model_validate(
                make_site_data(
                    name="Branch - London",
                    city="London",
                    region="Europe",
                    address="30 St Mary Axe, London",
                    routerIp="172.16.0.1",
                    routerMac="00:50:56:C0:00:01",
                )
            )
        )
        await session.commit()

        details = await service.get_details(site.id)

    return {
        "site_id": site.id,
        "other_site_id": other.id,
        "switch_ids": [sw.id for sw in details.switches],
        "ap_ids": [ap.id for ap in details.access_points],
    }


@pytest.fixture
def site_data():
    """Factory for plain site payloads."""
    return make_site_data


@pytest.fixture
def device_data():
    """Factory for switch and access point payloads."""
    return make_device_data
