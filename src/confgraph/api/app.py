"""
Main FastAPI application for the conference GraphQL server
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import get_data_path, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import DataStore, StoreHolder, load_store

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    holder: StoreHolder = app.state.store_holder
    logger.info("Starting conference GraphQL API...", conferences=holder.store.codes)

    yield

    logger.info("Shutting down conference GraphQL API...")


def reload_store(app: FastAPI, path: str | None = None) -> DataStore:
    """Load the dataset again and swap it in.

    The new snapshot is fully built before it replaces the old one; requests
    already running keep the snapshot they started with.
    """
    store = load_store(path or get_data_path(), strict_references=settings.strict_references)
    app.state.store_holder.replace(store)
    return store


def create_app(store: DataStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Dataset to serve. Loaded from ``settings`` when omitted; a
            load failure raises ``DataLoadError`` and aborts startup.
    """
    configure_logging(debug=settings.debug, level=settings.log_level)

    if store is None:
        store = load_store(get_data_path(), strict_references=settings.strict_references)

    app = FastAPI(
        title="Conference GraphQL API",
        description="Mock GraphQL API for a conference schedule",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store_holder = StoreHolder(store)

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        holder: StoreHolder = app.state.store_holder
        return {
            "status": "healthy",
            "version": __version__,
            "conferences": holder.store.codes,
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(
            app.state.store_holder, path=settings.graphql_path, graphiql=settings.graphiql
        )
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "confgraph.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
