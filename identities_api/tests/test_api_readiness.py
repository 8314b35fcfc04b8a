"""End-to-end tests for the readiness API."""

from app.core.health.models import HealthCheckResult
from app.core.interfaces.services.health_check import IHealthCheck


class StaticCheck(IHealthCheck):
    def __init__(self, result: HealthCheckResult) -> None:
        self.result = result

    async def check(self) -> HealthCheckResult:
        return self.result


class FailingCheck(IHealthCheck):
    async def check(self) -> HealthCheckResult:
        raise ConnectionError("directory unreachable")


def test_ready_without_checks_is_healthy(production_client) -> None:
    response = production_client.get("/health/ready")

    assert response.status_code == 200
    assert response.text == "Healthy"
    assert response.headers["content-type"].startswith("text/plain")
    assert response.headers["cache-control"] == "no-store, no-cache"


def test_ready_degraded_is_still_available(make_client) -> None:
    client = make_client(
        health_checks={
            "cache": StaticCheck(HealthCheckResult.healthy()),
            "directory": StaticCheck(HealthCheckResult.degraded("slow responses")),
        }
    )

    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.text == "Degraded"


def test_ready_unhealthy_returns_503(make_client) -> None:
    client = make_client(
        health_checks={
            "cache": StaticCheck(HealthCheckResult.degraded()),
            "directory": StaticCheck(HealthCheckResult.unhealthy("down")),
        }
    )

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.text == "Unhealthy"


def test_ready_check_raising_is_reported_unhealthy(make_client) -> None:
    client = make_client(health_checks={"directory": FailingCheck()})

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.text == "Unhealthy"


def test_ready_answers_head_requests(make_client, production_client) -> None:
    unhealthy_client = make_client(
        health_checks={"directory": StaticCheck(HealthCheckResult.unhealthy())}
    )

    assert production_client.head("/health/ready").status_code == 200
    response = unhealthy_client.head("/health/ready")
    assert response.status_code == 503
    assert response.headers["cache-control"] == "no-store, no-cache"
