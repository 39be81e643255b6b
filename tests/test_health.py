"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from attendtrack.interfaces.api.resources.health import HealthResource


def _client(health: HealthResource) -> TestClient:
    app = App()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Test client with health endpoints and no database probe."""
    return _client(HealthResource())


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200 without a probe."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_runs_probe() -> None:
    """Readiness awaits the probe and reports ready when it succeeds."""
    calls = []

    async def probe() -> None:
        calls.append(1)

    result = _client(HealthResource(readiness_probe=probe)).simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert calls == [1]


def test_health_ready_unavailable_when_probe_fails() -> None:
    """Probe errors give 503 while liveness stays 200."""

    async def probe() -> None:
        raise ConnectionError("database unavailable")

    client = _client(HealthResource(readiness_probe=probe))
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json == {"status": "unavailable"}
    assert client.simulate_get("/v1/health").status_code == 200
