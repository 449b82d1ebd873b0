"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.ph_crypt.application.service import Bcrypt
from src.ph_crypt.domain.models import BcryptConfig


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def crypt() -> Bcrypt:
    """Real bcrypt at the lowest supported cost, to keep tests fast."""
    return Bcrypt(BcryptConfig(cost=4, strong=False))
