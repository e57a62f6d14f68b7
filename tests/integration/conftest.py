"""
Fixtures for integration tests.

Provides:
- Test client for FastAPI app
- In-memory database for testing
- Request bodies for typical purchases
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import app
from src.core.dependencies import get_purchase_repository
from src.infrastructure.database import Base
from src.infrastructure.repositories import PostgresPurchaseRecordRepository


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def purchase_repository(test_session: AsyncSession) -> PostgresPurchaseRecordRepository:
    return PostgresPurchaseRecordRepository(test_session)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    purchase_repository: PostgresPurchaseRecordRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the in-memory database.

    Every request shares one session, so records written by one
    request are visible to the next.
    """
    async def override_get_purchase_repository():
        return purchase_repository

    app.dependency_overrides[get_purchase_repository] = override_get_purchase_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def good_purchase_request() -> dict:
    """A planned work purchase well inside the user's means."""
    return {
        "user_id": "user_good",
        "profile": {
            "monthly_income": 10000,
            "monthly_obligations": 3000,
            "current_balance": 40000,
            "currency": "SAR",
        },
        "savings_plans": [],
        "questionnaire": {
            "item": "Laptop",
            "price": 1000,
            "why_reason": "for work",
            "has_duplicate": False,
            "wanted_since": "planned for months",
            "urgency": "Not urgent",
            "feel_emoji": "happy",
            "timing_emoji": "no_rush",
            "help_emoji": "essential_for_work",
        },
    }


@pytest.fixture
def risky_purchase_request() -> dict:
    """An impulsive duplicate purchase while an urgent savings plan is running."""
    return {
        "user_id": "user_risky",
        "profile": {
            "monthly_income": 5000,
            "monthly_obligations": 2000,
            "current_balance": 2000,
            "currency": "USD",
        },
        "savings_plans": [
            {
                "id": "plan_trip",
                "target_amount": 3000,
                "monthly_amount": 1500,
                "duration_months": 2,
                "goal": "Trip",
            }
        ],
        "questionnaire": {
            "item": "Phone",
            "price": 3000,
            "why_reason": "just want it",
            "has_duplicate": True,
            "wanted_since": "recent",
            "urgency": "Very urgent",
            "feel_emoji": "excited",
            "timing_emoji": "right_now",
        },
    }


@pytest.fixture
def wait_purchase_request() -> dict:
    """A fun purchase that would eat into the safe buffer."""
    return {
        "user_id": "user_wait",
        "profile": {
            "monthly_income": 10000,
            "monthly_obligations": 3000,
            "current_balance": 2000,
        },
        "savings_plans": [
            {
                "id": "plan_car",
                "target_amount": 2000,
                "monthly_amount": 1000,
                "duration_months": 2,
            }
        ],
        "questionnaire": {
            "item": "Headphones",
            "price": 1000,
            "why_reason": "For fun",
            "has_duplicate": False,
            "wanted_since": "A few weeks",
            "feel_emoji": "neutral",
            "timing_emoji": "soon",
        },
    }
