"""
Main FastAPI application for dicegraph
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..dice import DiceRoller
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import MessageStore

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting dicegraph API...",
        environment=settings.environment,
        graphiql=settings.graphiql,
    )

    yield

    logger.info("Shutting down dicegraph API...", messages_stored=len(app.state.message_store))


def create_app(
    message_store: MessageStore | None = None, dice_roller: DiceRoller | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns one message store and one dice roller; both are
    handed to resolvers through the GraphQL context.
    """

    app = FastAPI(
        title="dicegraph API",
        description="GraphQL API over dice rolls, greetings and an in-memory message store",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.message_store = message_store if message_store is not None else MessageStore()
    app.state.dice_roller = dice_roller if dice_roller is not None else DiceRoller()

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

    # GraphQL endpoints (allow disabling for tests)
    if not os.getenv("DICEGRAPH_DISABLE_GRAPHQL"):
        try:
            from ..graphql.schema import (
                GRAPHQL_PATH,
                MESSAGES_GRAPHQL_PATH,
                create_graphql_router,
                validate_schema,
            )

            logger.info("Validating GraphQL schemas...")
            validate_schema()

            app.include_router(create_graphql_router(GRAPHQL_PATH), prefix="")
            app.include_router(
                create_graphql_router(MESSAGES_GRAPHQL_PATH, messages_only=True), prefix=""
            )
            logger.info(
                "GraphQL endpoints initialized successfully",
                endpoints=[GRAPHQL_PATH, MESSAGES_GRAPHQL_PATH],
            )
        except Exception as e:  # pragma: no cover
            logger.error("Failed to initialize GraphQL endpoints", error=str(e))
            # Re-raise to fail fast - server should not start with broken GraphQL
            raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "dicegraph.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
