"""Employee API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly, no auto-discovery
    - Global error handlers map EmployeeApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Upstream client (shared connection pool) created on startup, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_api.api.error_handlers import register_error_handlers
from employee_api.api.routes import employees, health
from employee_api.config import get_settings
from employee_api.infrastructure.observability import setup_logging
from employee_api.infrastructure.upstream_client import close_upstream, init_upstream

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    client = init_upstream(settings)
    logger.info(f"Employee API started (upstream {client.base_url})")
    yield
    await close_upstream()
    logger.info("Employee API shutting down")


app = FastAPI(
    title="Employee API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routes (explicit registration)
app.include_router(health.router)
app.include_router(employees.router)
