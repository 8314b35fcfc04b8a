"""Value types produced by health checks."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Mapping, Optional


class HealthStatus(IntEnum):
    """Health of a component, ordered from worst to best."""

    UNHEALTHY = 0
    DEGRADED = 1
    HEALTHY = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class HealthCheckResult:
    """Outcome of one health check."""

    status: HealthStatus
    description: Optional[str] = None
    exception: Optional[BaseException] = None
    data: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def healthy(
        cls, description: Optional[str] = None, **data: Any
    ) -> "HealthCheckResult":
        return cls(HealthStatus.HEALTHY, description, data=data)

    @classmethod
    def degraded(
        cls, description: Optional[str] = None, **data: Any
    ) -> "HealthCheckResult":
        return cls(HealthStatus.DEGRADED, description, data=data)

    @classmethod
    def unhealthy(
        cls,
        description: Optional[str] = None,
        exception: Optional[BaseException] = None,
        **data: Any,
    ) -> "HealthCheckResult":
        return cls(HealthStatus.UNHEALTHY, description, exception, data)


@dataclass(frozen=True)
class HealthReportEntry:
    """Result of a named check together with how long it took."""

    result: HealthCheckResult
    duration: float

    @property
    def status(self) -> HealthStatus:
        return self.result.status


@dataclass(frozen=True)
class HealthReport:
    """Aggregated outcome of every registered check."""

    entries: Dict[str, HealthReportEntry]
    duration: float

    @property
    def status(self) -> HealthStatus:
        """The worst status among the entries, healthy when there are none."""
        if not self.entries:
            return HealthStatus.HEALTHY
        return min(entry.status for entry in self.entries.values())
