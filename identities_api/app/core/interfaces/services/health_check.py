"""Health check interface definitions."""

from abc import ABC, abstractmethod

from app.core.health.models import HealthCheckResult


class IHealthCheck(ABC):
    """Interface for health check implementations."""

    @abstractmethod
    async def check(self) -> HealthCheckResult:
        """Return the result of a single probe of a dependency."""
        raise NotImplementedError
