import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from core.rate_limiter import RateLimiterMiddleware
from core.response import ok


@pytest.mark.asyncio
async def test_requests_over_the_limit_get_429():
    app = FastAPI()
    app.add_middleware(RateLimiterMiddleware, calls=2, per_seconds=60)

    @app.get("/ping")
    async def ping():
        return ok({"pong": True})

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        assert (await ac.get("/ping")).status_code == 200
        assert (await ac.get("/ping")).status_code == 200
        resp = await ac.get("/ping")

    assert resp.status_code == 429
    body = resp.json()
    assert body["success"] is False
    assert body["error"].startswith("Rate limit exceeded")
    assert int(resp.headers["Retry-After"]) >= 1


@pytest.mark.asyncio
async def test_rate_limited_response_is_logged_with_request_id(monkeypatch, collaborators, caplog):
    from config.settings import settings
    from main import create_app

    monkeypatch.setattr(settings, "RATE_LIMIT_CALLS", 1)
    caplog.set_level("INFO")
    app = create_app(collaborators)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        assert (await ac.get("/health")).status_code == 200
        resp = await ac.get("/health", headers={"X-Request-ID": "req-429"})

    assert resp.status_code == 429
    assert resp.headers["X-Request-ID"] == "req-429"
    assert "id=req-429" in caplog.text
    assert "status=429" in caplog.text


@pytest.mark.asyncio
async def test_idle_clients_are_forgotten(monkeypatch):
    from core import rate_limiter

    clock = {"now": 1000.0}
    monkeypatch.setattr(rate_limiter.time, "time", lambda: clock["now"])

    app = FastAPI()

    @app.get("/ping")
    async def ping():
        return ok({"pong": True})

    limiter = RateLimiterMiddleware(app, calls=5, per_seconds=60)
    limiter._buckets["ip:10.0.0.1"] = [900.0]
    limiter._buckets["ip:10.0.0.2"] = [990.0]

    async with AsyncClient(transport=ASGITransport(app=limiter), base_url="http://testserver") as ac:
        assert (await ac.get("/ping")).status_code == 200

    assert "ip:10.0.0.1" not in limiter._buckets
    assert "ip:10.0.0.2" in limiter._buckets
    assert limiter._buckets["ip:127.0.0.1"] == [1000.0]
