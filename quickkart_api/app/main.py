"""
Main entrypoint for the QuickKart store layout API.

This module assembles the FastAPI application, sets up logging, mounts
the GraphQL schema and includes the versioned REST routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn::

    uvicorn quickkart_api.app.main:app --reload

The MongoDB connection is opened once at startup and shared by every
request.
"""

import logging

from fastapi import FastAPI

from .api.graphql import create_graphql_router
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import close_db, init_db
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI instance serving GraphQL under
        ``settings.graphql_path`` and REST under ``/api/v1``.
    """
    # Configure logging first so that startup messages are formatted.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.include_router(create_graphql_router(), prefix=settings.graphql_path)
    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        await init_db()
        logger.info("Server ready, GraphQL at %s", settings.graphql_path)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await close_db()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
