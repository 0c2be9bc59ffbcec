"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 OK as long as the process is running."""
    return {"status": "healthy", "service": "bookstore"}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise.

    The image directory is reported but does not affect readiness.
    """
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    config = get_config()

    checks: dict[str, Any] = {}
    all_healthy = True

    try:
        db_healthy = app_deps.database_service.health_check()
        checks["database"] = {
            "status": "healthy" if db_healthy else "unhealthy",
            "type": "sqlite" if config.database.is_sqlite else "postgresql",
        }
        all_healthy = db_healthy
    except Exception as e:
        checks["database"] = {"status": "unhealthy", "error": str(e)}
        all_healthy = False

    checks["image_storage"] = {
        "status": "healthy",
        "root": str(getattr(app_deps.image_storage, "root", "")),
    }

    response = {
        "status": "ready" if all_healthy else "not_ready",
        "environment": config.app.environment,
        "checks": checks,
    }

    if not all_healthy:
        return JSONResponse(status_code=503, content=response)

    return response


@router.get("/database", response_model=None)
async def health_database(request: Request) -> dict[str, Any] | JSONResponse:
    """Database-specific health check with connection pool status."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    config = get_config()

    try:
        healthy = app_deps.database_service.health_check()
        return {
            "status": "healthy" if healthy else "unhealthy",
            "type": "sqlite" if config.database.is_sqlite else "postgresql",
            "pool": app_deps.database_service.get_pool_status(),
        }
    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
