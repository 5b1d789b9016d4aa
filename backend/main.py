"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
import logging
import re

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend import __version__
from backend.config import get_settings
from backend.database import engine, init_db
from backend.errors import ServiceError, UnauthenticatedError
from backend.logging_config import setup_logging
from backend.routers import auth, employees, tasks, teams

error_logger = logging.getLogger("teamtasks.errors")

INTERNAL_ERROR_MESSAGE = "Internal server error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    settings = get_settings()
    setup_logging(settings.log_dir, settings.debug)
    init_db()
    yield
    engine.dispose()


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Translate domain errors raised by services into JSON responses."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthenticatedError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and hide their details from the client."""
    error_logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(status_code=500, content={"detail": INTERNAL_ERROR_MESSAGE})


def _cors_kwargs(origins: list[str | re.Pattern[str]]) -> dict:
    """Split configured origins into exact values and one combined regex."""
    exact = [origin for origin in origins if isinstance(origin, str)]
    patterns = [origin.pattern for origin in origins if isinstance(origin, re.Pattern)]
    kwargs: dict = {"allow_origins": exact}
    if patterns:
        kwargs["allow_origin_regex"] = "|".join(f"(?:{pattern})" for pattern in patterns)
    return kwargs


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    prefix = settings.api_prefix

    app = FastAPI(
        title="TeamTasks API",
        description="Task tracking for employees organised in teams",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        **_cors_kwargs(settings.cors_origins_list),
    )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(auth.router, prefix=f"{prefix}/auth", tags=["auth"])
    app.include_router(tasks.router, prefix=f"{prefix}/tasks", tags=["tasks"])
    app.include_router(teams.router, prefix=f"{prefix}/teams", tags=["teams"])
    app.include_router(employees.router, prefix=f"{prefix}/employees", tags=["employees"])

    @app.get(f"{prefix}/health", tags=["health"])
    def health() -> dict:
        """Liveness probe."""
        return {"status": "ok", "version": __version__}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "backend.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        reload_excludes=["*.log", "*.db", "*.db-journal", "*.pyc"] if settings.debug else None,
    )
