"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import StudyhallError
from modules.auth.routes import router as auth_router
from modules.billing.routes import router as billing_router
from modules.progress.routes import router as progress_router
from modules.tasks.routes import router as tasks_router
from modules.user_tasks.routes import router as user_tasks_router
from modules.votes.routes import router as votes_router

from .models.errors import ErrorResponse
from .routes import health, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(
        "Starting %s on %s:%s (%s)",
        settings.app_name, settings.host, settings.port, settings.environment,
    )
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


async def studyhall_error_handler(request: Request, exc: StudyhallError) -> JSONResponse:
    """Render application errors as {error, code} JSON bodies."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message, code=exc.code).model_dump(exclude_none=True),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed requests as 400 {error, code} bodies."""
    errors = exc.errors()
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)

    message = "Invalid request"
    fields = [".".join(str(part) for part in error["loc"]) for error in errors]
    if fields:
        message = f"{message}: {', '.join(fields)}"
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=message, code="INVALID_REQUEST").model_dump(exclude_none=True),
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Study tasks, user sessions and subscription billing",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(StudyhallError, studyhall_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    # Before the catalog router, which would match "vote" as a task_id
    app.include_router(votes_router, prefix="/api/tasks/vote", tags=["votes"])
    app.include_router(tasks_router, prefix="/api/tasks", tags=["tasks"])
    app.include_router(user_tasks_router, prefix="/api/user-tasks", tags=["user-tasks"])
    app.include_router(progress_router, prefix="/api/user/progress", tags=["progress"])
    app.include_router(billing_router, prefix="/api/stripe", tags=["billing"])

    return app


# Application instance for uvicorn
app = create_app()
