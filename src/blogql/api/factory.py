"""
FastAPI application factory for the blogql server
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import get_logger
from ..middleware import LoggingContextMiddleware
from ..store import InMemoryStore
from ..store.seed_data import seed_demo_data

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting blogql API",
        port=settings.api_port,
        environment=settings.environment,
        **app.state.store.counts(),
    )

    yield

    # The store is process memory; nothing to flush.
    logger.info("Shutting down blogql API", **app.state.store.counts())


def create_app(store: InMemoryStore | None = None, graphiql: bool | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Store shared by every request. A new empty store is created
            when omitted.
        graphiql: Serve the GraphiQL IDE on GET /graphql. Defaults to
            ``settings.graphiql``.
    """
    if store is None:
        store = InMemoryStore()
    if graphiql is None:
        graphiql = settings.graphiql

    if settings.seed_demo_data:
        seed_demo_data(store)

    app = FastAPI(
        title="blogql API",
        description="In-memory GraphQL API for users, posts and comments",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store

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
        return {"status": "healthy", "version": __version__, "counts": store.counts()}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(store, graphiql=graphiql)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Fail fast: the server is useless without its GraphQL endpoint
        raise

    return app
