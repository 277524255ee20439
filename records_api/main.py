"""Record API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error": <string>}
    - CORS configured from settings
    - Database manager created on startup and disposed on shutdown via lifespan
    - Startup never fails on an unreachable database: the error is logged and
      requests surface it as 500 until the store comes back

Design Decisions:
    - Lifespan over @app.on_event
    - Static landing page mounted AFTER API routes so /api/* takes precedence
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from records_api.api.error_handlers import register_error_handlers
from records_api.api.routes import blogs, contacts, gallery, health
from records_api.config import get_settings
from records_api.core.errors import OperationError
from records_api.infrastructure.database import close_db, init_db
from records_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        if settings.database_create_schema:
            await manager.create_schema()
        if await manager.health_check():
            logger.info("Database connected")
        else:
            logger.error("Database connection error: store unreachable at startup")
    except OperationError as e:
        logger.error(f"Database connection error: {e.message}")
    logger.info("Record API started")
    yield
    await close_db()
    logger.info("Record API shutting down")


app = FastAPI(
    title="Raushan Apps Record API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(contacts.router)
app.include_router(blogs.router)
app.include_router(gallery.router)

register_error_handlers(app)

if settings.static_dir.is_dir():
    app.mount(
        "/", StaticFiles(directory=str(settings.static_dir), html=True),
        name="static",
    )
else:
    logger.warning(f"Static directory {settings.static_dir} not found; landing page disabled")


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "records_api.main:app", host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    run()
