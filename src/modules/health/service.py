from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

from sqlalchemy import text

from src.core.base import BaseService
from src.modules.volunteer.profile import VolunteerProfileService

HealthStatus = Literal["healthy", "degraded", "unhealthy"]


@dataclass
class HealthCheckResult:
    service: str
    status: HealthStatus
    connected: bool
    details: dict = field(default_factory=dict)
    error: str | None = None


@dataclass
class OverallHealthStatus:
    status: HealthStatus
    services: dict[str, HealthCheckResult]
    timestamp: str


class HealthService(BaseService):
    """Checks the database and the optional parts of the volunteer schema."""

    async def check_database(self) -> HealthCheckResult:
        try:
            await self.db.execute(text("SELECT 1"))
        except Exception as e:
            self.logger.error(f"Database health check error: {e}")
            return HealthCheckResult(
                service="database", status="unhealthy", connected=False, error=str(e)
            )
        return HealthCheckResult(service="database", status="healthy", connected=True)

    async def check_profile_schema(self) -> HealthCheckResult:
        """Missing optional profile tables degrade the service without breaking it."""
        try:
            unavailable = await VolunteerProfileService(self.db).get_unavailable_fields()
        except Exception as e:
            self.logger.error(f"Profile schema health check error: {e}")
            return HealthCheckResult(
                service="profile_schema",
                status="unhealthy",
                connected=False,
                error=str(e),
            )
        return HealthCheckResult(
            service="profile_schema",
            status="degraded" if unavailable else "healthy",
            connected=True,
            details={"unavailable_fields": unavailable},
        )

    async def run_all_checks(self) -> OverallHealthStatus:
        # Checks share one session, so they run in sequence
        results = [await self.check_database()]
        if results[0].connected:
            results.append(await self.check_profile_schema())

        statuses = {result.status for result in results}
        if "unhealthy" in statuses:
            overall: HealthStatus = "unhealthy"
        elif "degraded" in statuses:
            overall = "degraded"
        else:
            overall = "healthy"

        return OverallHealthStatus(
            status=overall,
            services={result.service: result for result in results},
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
