"""
Main FastAPI application for the contenthub backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import init_database
from ..database.connection import test_database_connection
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting contenthub API...")
    init_database()

    ok, error = await test_database_connection()
    if ok:
        logger.info("Database connection verified")
    else:
        logger.error("Database connection check failed", error=error)
        if settings.environment.lower() in ("production", "prod"):
            raise RuntimeError(error)

    yield

    logger.info("Shutting down contenthub API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="contenthub API",
        description="GraphQL API for posts, video games and listings",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()
    app.include_router(create_graphql_router(), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app
