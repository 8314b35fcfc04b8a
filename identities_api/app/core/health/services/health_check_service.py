"""Aggregation of registered health checks into a single report."""

import asyncio
import time
from typing import Dict, List, Mapping, Optional

from app.core.health.models import (
    HealthCheckResult,
    HealthReport,
    HealthReportEntry,
    HealthStatus,
)
from app.core.interfaces.services.health_check import IHealthCheck
from app.logger import logger


class HealthCheckService:
    """Runs named health checks concurrently and aggregates their results."""

    def __init__(self, checks: Optional[Mapping[str, IHealthCheck]] = None) -> None:
        self._checks: Dict[str, IHealthCheck] = {}
        for name, check in (checks or {}).items():
            self.register(name, check)

    @property
    def names(self) -> List[str]:
        return list(self._checks)

    def register(self, name: str, check: IHealthCheck) -> None:
        """Add a check under a unique name."""
        if name in self._checks:
            raise ValueError(f"A health check named '{name}' is already registered.")
        self._checks[name] = check

    async def check_health(self) -> HealthReport:
        """Run every registered check and return the aggregated report."""
        start = time.perf_counter()
        names = list(self._checks)
        entries = await asyncio.gather(*(self._run(name) for name in names))
        return HealthReport(
            entries=dict(zip(names, entries)),
            duration=time.perf_counter() - start,
        )

    async def _run(self, name: str) -> HealthReportEntry:
        start = time.perf_counter()
        try:
            result = await self._checks[name].check()
        except Exception as exc:
            logger.exception(f"Health check '{name}' raised an exception")
            result = HealthCheckResult.unhealthy(str(exc) or None, exception=exc)

        duration = time.perf_counter() - start
        if result.status < HealthStatus.HEALTHY:
            logger.warning(
                f"Health check '{name}' completed with status {result.status.label}"
            )
        return HealthReportEntry(result=result, duration=duration)
