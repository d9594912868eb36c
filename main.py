"""
Main FastAPI application (entrypoint).

Responsibilities:
- Build the collaborators once (session provider, automation runner/tester, job repository)
- Wire API routers (auth, automation, debug probes) under /api
- Register centralized exception handlers so every response is an envelope
- Provide middleware: request-id logging, in-memory rate limiting
- Add a health endpoint
- On shutdown: cancel pending detached tasks and dispose the DB engine
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from api import routes_auth, routes_automation, routes_debug
from config.settings import settings
from core import db
from core.dependencies import Collaborators, build_collaborators
from core.exception_handlers import register_exception_handlers
from core.logging import configure_logging, request_logging_middleware
from core.rate_limiter import RateLimiterMiddleware
from core.response import ok

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Job Hunt API startup (db enabled: %s)", db.engine is not None)
    yield
    logger.info("Job Hunt API shutdown...")
    await app.state.collaborators.detached_tasks.shutdown()
    await db.dispose_engine()


def create_app(collaborators: Collaborators | None = None) -> FastAPI:
    """Build the API; pass collaborators to replace the configured ones."""
    app = FastAPI(title=settings.API_TITLE, version=settings.API_VERSION, lifespan=lifespan)
    app.state.collaborators = collaborators or build_collaborators(settings)

    # CORS - adjust origins for production
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes_auth.router, prefix="/api", tags=["auth"])
    app.include_router(routes_automation.router, prefix="/api", tags=["automation"])
    app.include_router(routes_debug.router, prefix="/api", tags=["debug"])

    register_exception_handlers(app)

    app.add_middleware(RateLimiterMiddleware, calls=settings.RATE_LIMIT_CALLS, per_seconds=settings.RATE_LIMIT_PERIOD)

    # Request logging (adds X-Request-ID header); registered last so it wraps the rate limiter
    app.middleware("http")(request_logging_middleware)

    @app.get("/health")
    async def health():
        """Simple health endpoint used by load balancers and orchestrators."""
        return ok({"status": "ok"})

    return app


configure_logging()
app = create_app()

if __name__ == "__main__":
    # Run with: python main.py for local dev. For production use uvicorn/gunicorn with workers.
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
