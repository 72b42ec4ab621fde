#!/usr/bin/env python3
"""
Main CLI entry point for the dicegraph server.
"""

import os
import sys

import click
import uvicorn

from dicegraph import __version__
from dicegraph.config import settings
from dicegraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="dicegraph")
def cli() -> None:
    """dicegraph CLI - run the server and inspect the GraphQL schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1). Each worker keeps its own messages.",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
) -> None:
    """Start the dicegraph API server."""

    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting dicegraph API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # The app reads these at import time when started by reload/workers
    if log_level == "debug":
        os.environ["DICEGRAPH_DEBUG"] = "true"
        os.environ["DICEGRAPH_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("DICEGRAPH_DEBUG", "false")
        os.environ.setdefault("DICEGRAPH_LOG_LEVEL", log_level)

    try:
        # When using reload or multiple workers, pass app as import string
        if reload or workers > 1:
            uvicorn.run(
                "dicegraph.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            from dicegraph.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--messages-only",
    is_flag=True,
    default=False,
    help="Print the schema served at /graphqlmutations instead of /graphql",
)
def schema(messages_only: bool) -> None:
    """Print the GraphQL schema in SDL form."""
    from dicegraph.graphql.schema import message_schema, schema as main_schema

    click.echo(str(message_schema if messages_only else main_schema))


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
