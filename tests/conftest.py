"""Shared fixtures: an in-memory SQLite store, a controllable clock, and an HTTP client.

Every test gets a fresh database, so tests never see each other's rows.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.domain  # noqa: F401  (registers all tables on Base.metadata)
from app.core.clock import DeterministicClock, get_clock
from app.db.base import Base, get_db
from app.main import create_app
from app.schemas.company import CompanyPayload
from app.services.company import CompanyService
from app.services.requests import RequestService
from app.services.statements import StatementService


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def clock() -> DeterministicClock:
    return DeterministicClock()


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------

@pytest.fixture
def company_service(session, clock) -> CompanyService:
    return CompanyService(session, clock)


@pytest.fixture
def request_service(session, clock) -> RequestService:
    return RequestService(session, clock)


@pytest.fixture
def statement_service(session, clock) -> StatementService:
    return StatementService(session, clock)


def acme_payload(**overrides) -> CompanyPayload:
    fields = {
        "name": "Acme",
        "category": "Retail",
        "address": "1 Main St",
        "city": "Springfield",
        "province": "IL",
        "country": "US",
        "postal_code": "62701",
        "email": "ops@acme.test",
        "phone": "5550100",
        "division_names": ["Finance", "Sales"],
    }
    fields.update(overrides)
    return CompanyPayload(**fields)


@pytest.fixture
async def acme(company_service):
    """Company "Acme" and its executive."""
    return await company_service.create_company(acme_payload())


@pytest.fixture
async def globex(company_service):
    """A second, unrelated company."""
    return await company_service.create_company(acme_payload(name="Globex", category="Energy"))


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(session_factory, clock) -> AsyncGenerator[httpx.AsyncClient, None]:
    app = create_app()

    async def _test_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _test_db
    app.dependency_overrides[get_clock] = lambda: clock

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
