# =======================================================================================
# gym_admin/workers/__init__.py - Workers Package
# =======================================================================================
from .event_stream import EventStreamClient
from .dashboard_worker import LiveDashboardWorker

__all__ = ["EventStreamClient", "LiveDashboardWorker"]
