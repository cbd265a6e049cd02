"""Application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from velocityiq.api.container import get_container
from velocityiq.api.dependencies import limiter
from velocityiq.api.middleware import RequestIDMiddleware
from velocityiq.api.routes.dependencies import router as dependencies_router
from velocityiq.api.routes.sonarqube import router as sonarqube_router
from velocityiq.api.routes.tech_debt import router as tech_debt_router
from velocityiq.infrastructure.services.http_pool import HTTPPool
from velocityiq.shared.logging import setup_logging

log = structlog.get_logger()


def _apply_logging_config(container):
    """Apply logging from container config (stdout + optional file)."""
    c = container.config
    setup_logging(
        level=c.log_level,
        file_path=c.log_file or "",
        rotation_max_mb=c.log_rotation_max_mb,
        rotation_backups=c.log_rotation_backups,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: load config and logging. Shutdown: close the shared HTTP pool."""
    container = get_container()
    _apply_logging_config(container)
    log.info(
        "startup_complete",
        sonarqube_configured=container.config.sonarqube.is_configured,
        dependency_source=container.dependency_source_name,
    )
    yield
    log.info("shutdown_begin")
    await HTTPPool.reset()
    log.info("shutdown_complete")


app = FastAPI(
    title="VelocityIQ",
    version="0.1.0",
    description="Technical-debt risk scoring and dependency suggestions from SonarQube and GitHub",
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Request ids (innermost, so ids are bound before route code runs)
app.add_middleware(RequestIDMiddleware)

# CORS
container = get_container()
app.add_middleware(
    CORSMiddleware,
    allow_origins=container.config.security.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)

# Register routers
app.include_router(tech_debt_router)
app.include_router(dependencies_router)
app.include_router(sonarqube_router)


@app.get("/health")
@limiter.limit("100/minute")
async def health(request: Request) -> dict:
    """Health check with integration configuration status."""
    container = get_container()
    return {
        "status": "ok",
        "service": "velocityiq",
        "sonarqube_configured": container.config.sonarqube.is_configured,
        "dependency_source": container.dependency_source_name,
    }
