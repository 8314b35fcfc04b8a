"""This file contains the health check service dependency."""

from fastapi import Request

from app.core.health.services.health_check_service import HealthCheckService


def get_health_check_service(request: Request) -> HealthCheckService:
    """Provide the health check service registered at startup."""
    return request.app.state.health_checks
