"""Integration tests for the bcrypt API, served in-process over ASGI."""

from unittest.mock import MagicMock

import pytest
from httpx import AsyncClient

from src.main import app
from src.ph_common.errors import EntropySourceError
from src.ph_crypt.application.service import Bcrypt
from src.ph_crypt.domain.models import BcryptConfig

STORED_PASSWORD = "$2a$06$OxDCTUayLyPtLRWxbhPoPer8io68QbDErcImQ1oQKuFgO5Vkawfuu"


class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestHash:
    async def test_hash_with_fresh_settings(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/bcrypt/hash", json={"password": "s3cret"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["code"] == 0
        assert body["data"]["hash"].startswith("$2a$06$")
        assert len(body["data"]["hash"]) == 60
        assert body["request_id"] == resp.headers["X-Request-ID"]

    async def test_hash_with_known_settings(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/bcrypt/hash",
            json={"password": "password", "settings": "$2a$06$OxDCTUayLyPtLRWxbhPoPe"},
        )
        assert resp.status_code == 200
        assert resp.json()["data"]["hash"] == STORED_PASSWORD

    async def test_garbage_settings_ignored(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/bcrypt/hash",
            json={"password": "pw", "settings": "not-a-settings-string"},
        )
        assert resp.status_code == 200
        assert resp.json()["data"]["hash"].startswith("$2a$06$")

    async def test_rejected_settings(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/bcrypt/hash",
            json={"password": "pw", "settings": "$2a$03$OxDCTUayLyPtLRWxbhPoPe"},
        )
        assert resp.status_code == 422
        body = resp.json()
        assert body["code"] == 1001
        assert body["data"] is None


class TestValidate:
    async def test_round_trip(self, client: AsyncClient) -> None:
        hashed = (
            await client.post("/api/v1/bcrypt/hash", json={"password": "s3cret"})
        ).json()["data"]["hash"]

        ok = await client.post(
            "/api/v1/bcrypt/validate", json={"password": "s3cret", "hashed": hashed}
        )
        bad = await client.post(
            "/api/v1/bcrypt/validate", json={"password": "guess", "hashed": hashed}
        )
        assert ok.json()["data"] == {"valid": True}
        assert bad.json()["data"] == {"valid": False}

    async def test_known_vector(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/bcrypt/validate",
            json={"password": "password", "hashed": STORED_PASSWORD},
        )
        assert resp.status_code == 200
        assert resp.json()["data"]["valid"] is True

    async def test_broken_hash_is_error_not_false(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/bcrypt/validate",
            json={"password": "password", "hashed": "$2a$06$tooshort"},
        )
        assert resp.status_code == 422
        body = resp.json()
        assert body["code"] == 1001
        assert body["data"] is None

    async def test_missing_hash_rejected(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/bcrypt/validate", json={"password": "pw"})
        assert resp.status_code == 422


class TestEntropyFailure:
    @pytest.fixture
    def broken_entropy(self, monkeypatch: pytest.MonkeyPatch) -> MagicMock:
        entropy = MagicMock()
        entropy.get_weak.side_effect = EntropySourceError("weak source exhausted")
        entropy.get_strong.side_effect = EntropySourceError("strong source exhausted")
        monkeypatch.setattr(
            app.state, "bcrypt", Bcrypt(BcryptConfig(cost=4), entropy=entropy)
        )
        return entropy

    async def test_hash_returns_503_envelope(
        self, client: AsyncClient, broken_entropy: MagicMock
    ) -> None:
        resp = await client.post("/api/v1/bcrypt/hash", json={"password": "pw"})
        assert resp.status_code == 503
        body = resp.json()
        assert body["code"] == 1002
        assert "weak source exhausted" in body["message"]
        assert body["data"] is None
        assert body["request_id"] == resp.headers["X-Request-ID"]
        broken_entropy.get_weak.assert_called_once_with(16)

    async def test_validate_with_stored_settings_needs_no_entropy(
        self, client: AsyncClient, broken_entropy: MagicMock
    ) -> None:
        resp = await client.post(
            "/api/v1/bcrypt/validate",
            json={"password": "password", "hashed": STORED_PASSWORD},
        )
        assert resp.status_code == 200
        assert resp.json()["data"]["valid"] is True
        broken_entropy.get_weak.assert_not_called()
