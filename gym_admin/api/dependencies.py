# =======================================================================================
# gym_admin/api/dependencies.py - FastAPI Dependencies
# =======================================================================================
from fastapi import Depends, Request
from ..runtime import AdminRuntime
from ..services.auth_service import Session
from ..workers.dashboard_worker import LiveDashboardWorker

def get_runtime(request: Request) -> AdminRuntime:
    """Dependency to get the runtime built at startup."""
    return request.app.state.runtime

def get_session(runtime: AdminRuntime = Depends(get_runtime)) -> Session:
    """Dependency that requires a signed-in administrator."""
    return runtime.require_session()

def get_dashboard_worker(runtime: AdminRuntime = Depends(get_runtime)) -> LiveDashboardWorker:
    return runtime.require_worker()
