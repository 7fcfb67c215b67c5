"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized failure-to-problem mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Database schema creation

No business logic belongs here.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from survey_basket.core.config import settings
from survey_basket.infrastructure.database import init_db
from survey_basket.interfaces.auth.router import router as auth_router
from survey_basket.interfaces.dependencies import get_engine
from survey_basket.interfaces.health import router as health_router
from survey_basket.interfaces.polls.router import router as polls_router
from survey_basket.shared.errors.handlers import register_error_handlers
from survey_basket.shared.logging import configure_logging
from survey_basket.shared.security.headers import SecurityHeadersMiddleware
from survey_basket.shared.security.rate_limiting import limiter


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables before serving requests."""
    engine = app.dependency_overrides.get(get_engine, get_engine)()
    init_db(engine)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(polls_router, prefix="/api/v1")
    app.include_router(auth_router, prefix="/api/v1")

    return app


app = create_app()
