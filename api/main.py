# api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.error_handlers import register_error_handlers
from api.middleware import RequestIdMiddleware
from api.routes import authors, books, health
from core.config import Settings, get_settings
from core.log import setup_logging
from core.sa.database import Database

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Defaults to the environment / .env settings
        database: Use an existing database instead of connecting to
            ``settings.sqlalchemy_url``. A database passed in is left open
            on shutdown, one created here is disposed.
    """
    settings = settings or get_settings()
    setup_logging(settings.service_name, settings.log_level)

    owns_database = database is None
    if owns_database:
        database = Database(settings.sqlalchemy_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.service_name}, database {settings.masked_url()}")
        if settings.db_auto_migrate:
            logger.info("Creating database schema")
            database.init_db()
        yield
        if owns_database:
            database.dispose()
        logger.info(f"Stopped {settings.service_name}")

    app = FastAPI(title=settings.service_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIdMiddleware)

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(authors.router)
    app.include_router(books.router)

    return app


# Main execution
if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host=settings.server_host,
        port=settings.server_port,
        reload=True,
        reload_dirs=["api", "core"]
    )
