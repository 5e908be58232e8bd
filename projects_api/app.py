"""FastAPI application for the Projects API."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from projects_api.core.config import Settings, get_settings
from projects_api.core.logging_config import setup_logging
from projects_api.domain.errors import ProjectError
from projects_api.repositories import build_store
from projects_api.routers import projects as projects_router
from projects_api.services.project_service import ProjectService

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers on every JSON response."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def create_app(service: Optional[ProjectService] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the app. Pass ``service`` to run against a substitute store."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file or None)
    owns_sql_store = service is None and settings.store_backend == "sql"

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        if owns_sql_store and settings.auto_create_tables:
            from projects_api.db.create_tables import create_all

            create_all()
            logger.info("Database schema ready")
        yield

    app = FastAPI(title="Projects API", lifespan=lifespan)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    app.state.project_service = service or ProjectService(build_store(settings.store_backend))
    app.add_exception_handler(ProjectError, projects_router.project_error_handler)
    app.add_exception_handler(RequestValidationError, projects_router.request_validation_handler)
    app.include_router(projects_router.router)

    @app.get("/health")
    def health():
        return {"ok": True}

    logger.info("Projects API configured (env=%s, store=%s)", settings.app_env, settings.store_backend)
    return app


app = create_app()
