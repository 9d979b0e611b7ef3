# =======================================================================================
# gym_admin/main.py - FastAPI Application Entry Point
# =======================================================================================
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import config
from .api.routes.auth import router as auth_router
from .api.routes.dashboard import router as dashboard_router
from .api.routes.gym import router as gym_router
from .api.routes.members import router as members_router
from .api.routes.memberships import router as memberships_router
from .models.schemas import HealthResponse
from .runtime import AdminRuntime
from .utils.exceptions import InputValidationError, NotAuthenticatedError, RequestError

logger = logging.getLogger(__name__)


def create_app(runtime: Optional[AdminRuntime] = None) -> FastAPI:
    app = FastAPI(
        title="Gym Admin Live Client",
        version="1.0.0",
        description="Administrative client with a live, reconciled facility dashboard",
        debug=config.API_DEBUG,
    )
    app.state.runtime = runtime or AdminRuntime()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(auth_router, prefix="/api", tags=["auth"])
    app.include_router(dashboard_router, prefix="/api", tags=["dashboard"])
    app.include_router(members_router, prefix="/api", tags=["members"])
    app.include_router(memberships_router, prefix="/api", tags=["memberships"])
    app.include_router(gym_router, prefix="/api", tags=["gym"])

    # Error mapping: validation -> 400, no session -> 401, backend failure -> 502
    @app.exception_handler(InputValidationError)
    async def validation_error_handler(request: Request, exc: InputValidationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    @app.exception_handler(NotAuthenticatedError)
    async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError):
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(exc)})

    @app.exception_handler(RequestError)
    async def request_error_handler(request: Request, exc: RequestError):
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": str(exc), "status": exc.status_code, "backend": exc.detail},
        )

    @app.get("/api/health", response_model=HealthResponse, tags=["health"])
    def api_health():
        rt: AdminRuntime = app.state.runtime
        stream_state = rt.worker.stream.state.value if rt.worker is not None else None
        return HealthResponse(status="ok", authenticated=rt.session is not None, stream=stream_state)

    @app.on_event("shutdown")
    async def shutdown_event():
        await app.state.runtime.aclose()
        if config.API_DEBUG:
            logger.info("Gym admin client stopped")

    return app


def run() -> None:
    """Console entry point: serve the local API with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(), host=config.API_HOST, port=config.API_PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
