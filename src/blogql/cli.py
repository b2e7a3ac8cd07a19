#!/usr/bin/env python3
"""
Main CLI entry point for the blogql server.
"""

import os
import sys

import click
import uvicorn

from blogql import __version__
from blogql.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="blogql")
def cli() -> None:
    """blogql CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=4000,
    type=int,
    envvar="BLOGQL_API_PORT",
    help="Port to bind to (default: 4000)",
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
    help="Number of worker processes; each holds its own store (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option(
    "--seed-demo-data",
    is_flag=True,
    default=False,
    help="Start with a small demo dataset",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
    seed_demo_data: bool,
) -> None:
    """Start the blogql API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting blogql API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    if workers > 1:
        logger.warning(
            "Each worker process holds an independent in-memory store",
            workers=workers,
        )

    # Child processes spawned for reload/workers read their settings from the environment
    if log_level == "debug":
        os.environ["BLOGQL_DEBUG"] = "true"
        os.environ["BLOGQL_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BLOGQL_DEBUG", "false")
        os.environ.setdefault("BLOGQL_LOG_LEVEL", log_level)
    if seed_demo_data:
        os.environ["BLOGQL_SEED_DEMO_DATA"] = "true"

    try:
        if reload or workers > 1:
            uvicorn.run(
                "blogql.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),
                log_level=log_level,
                access_log=True,
            )
        else:
            from blogql.api.factory import create_app
            from blogql.store import InMemoryStore
            from blogql.store.seed_data import seed_demo_data as seed

            store = InMemoryStore()
            if seed_demo_data:
                seed(store)

            uvicorn.run(
                create_app(store),
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
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from blogql.graphql.schema import print_schema

    click.echo(print_schema())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
