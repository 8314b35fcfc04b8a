"""API endpoints for health checks."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.core.health.models import HealthStatus
from app.core.health.services.health_check_service import HealthCheckService
from app.entrypoints.api.schemas.health import HealthStatusResponse
from app.settings import Settings
from app.setup.health_checks import get_health_check_service
from app.setup.settings import get_settings

SERVICE_NAME = "AzureIdentitiesApi"

# Readiness responses must never be served from a cache.
NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache",
    "Pragma": "no-cache",
    "Expires": "Thu, 01 Jan 1970 00:00:00 GMT",
}

router = APIRouter(tags=["Metrics"])


@router.get(
    "",
    operation_id="HealthCheck",
    summary="Health check endpoint",
    description="Returns the health status of the API",
    response_model=HealthStatusResponse,
)
async def health_check(
    settings: Settings = Depends(get_settings),
) -> HealthStatusResponse:
    """Static liveness probe, always healthy."""

    # Uptime mirrors the timestamp rather than the process age.
    now = datetime.now(timezone.utc).isoformat()
    return HealthStatusResponse(
        status=HealthStatus.HEALTHY.label,
        service=SERVICE_NAME,
        timestamp=now,
        environment=settings.environment,
        uptime=now,
    )


@router.get(
    "/ready",
    summary="Readiness check.",
    response_class=PlainTextResponse,
    responses={503: {"description": "At least one health check is unhealthy."}},
)
@router.head("/ready", include_in_schema=False)
async def readiness_check(
    health_checks: HealthCheckService = Depends(get_health_check_service),
) -> PlainTextResponse:
    """Runs the registered health checks and reports the worst status."""

    report = await health_checks.check_health()
    status_code = 503 if report.status == HealthStatus.UNHEALTHY else 200
    return PlainTextResponse(
        report.status.label, status_code=status_code, headers=NO_CACHE_HEADERS
    )
