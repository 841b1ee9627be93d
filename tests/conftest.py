"""
Test configuration and shared fixtures.

The FastAPI app runs against an in-memory fake of the Motor database and a
mocked payment gateway; nothing here talks to MongoDB or Stripe.
"""

import os
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Set test environment variables before importing app modules
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-access-token-secret")
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_contestpro")
os.environ.setdefault("DATABASE_NAME", "contestPro")
os.environ.setdefault("PAYMENT_CURRENCY", "usd")

from tests.support.fake_mongo import FakeDatabase  # noqa: E402


def pytest_configure(config):
    """Register test tiers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "api: API endpoint tests")


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest_asyncio.fixture
async def fake_db():
    """Fake database with the same indexes the app creates at startup."""
    from contestpro.database import Database

    db = FakeDatabase()
    Database.client = {os.environ["DATABASE_NAME"]: db}
    await Database.create_indexes()
    yield db
    Database.client = None


# =============================================================================
# AUTHENTICATION FIXTURES
# =============================================================================


@pytest_asyncio.fixture
async def admin_user(fake_db):
    """An admin account; returns its email."""
    from contestpro.database import USERS_COLLECTION

    await fake_db[USERS_COLLECTION].insert_one({"email": "admin@contestpro.io", "name": "Admin", "role": "admin"})
    return "admin@contestpro.io"


@pytest_asyncio.fixture
async def regular_user(fake_db):
    """A non-admin account; returns its email."""
    from contestpro.database import USERS_COLLECTION

    await fake_db[USERS_COLLECTION].insert_one({"email": "user@contestpro.io", "name": "User", "role": "user"})
    return "user@contestpro.io"


# =============================================================================
# PAYMENT FIXTURES
# =============================================================================


@pytest.fixture
def mock_gateway():
    """Payment gateway double returning a fixed client secret."""
    from contestpro.services.payment.gateways.base import PaymentIntentResult

    gateway = MagicMock()
    gateway.gateway_name = "Stripe"
    gateway.create_payment_intent = AsyncMock(
        return_value=PaymentIntentResult(
            success=True,
            intent_id="pi_test_123",
            client_secret="pi_test_123_secret_abc",
            status="requires_payment_method",
        )
    )
    return gateway


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================


@pytest.fixture
def app(fake_db, mock_gateway):
    """FastAPI application with the database and payment gateway overridden."""
    from contestpro.main import app as fastapi_app
    from contestpro.database import get_database
    from contestpro.routes.payment.payment_routes import get_payment_service
    from contestpro.services.payment.payment_service import PaymentService

    async def _get_fake_database():
        return fake_db

    fastapi_app.dependency_overrides[get_database] = _get_fake_database
    fastapi_app.dependency_overrides[get_payment_service] = lambda: PaymentService(mock_gateway)

    yield fastapi_app

    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async test client; the app lifespan (real MongoDB) is not started."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
