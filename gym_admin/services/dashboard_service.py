# =======================================================================================
# gym_admin/services/dashboard_service.py
# =======================================================================================

from ..backend import BackendClient, parse_response
from ..models.schemas import OperationalSummary


class DashboardService:
    """Fetches authoritative dashboard snapshots."""

    def __init__(self, backend: BackendClient):
        self.backend = backend

    async def fetch_summary(self) -> OperationalSummary:
        data = await self.backend.get("/dashboard/summary")
        return parse_response(OperationalSummary, data)

