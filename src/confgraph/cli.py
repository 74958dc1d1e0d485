#!/usr/bin/env python3
"""
Main CLI entry point for the conference GraphQL server.
"""

import os
import sys

import click
import uvicorn

from confgraph import __version__
from confgraph.config import get_data_path, settings
from confgraph.errors import DataLoadError, ResolutionError
from confgraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="confgraph")
def cli() -> None:
    """confgraph CLI - serve and inspect the conference GraphQL API."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Dataset JSON file (default: bundled dataset)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, data_path: str | None, log_level: str) -> None:
    """Start the GraphQL API server."""
    debug = log_level == "debug"
    configure_logging(debug=debug, level=log_level)

    logger.info("Starting conference GraphQL server", host=host, port=port, reload=reload)

    # The factory runs in this process and reads the live settings; reload
    # workers are fresh processes and build their settings from the environment
    if data_path:
        path = os.path.abspath(data_path)
        settings.data_path = path
        os.environ["CONFGRAPH_DATA_PATH"] = path
    settings.debug = debug
    settings.log_level = log_level.upper()
    os.environ["CONFGRAPH_DEBUG"] = "true" if debug else "false"
    os.environ["CONFGRAPH_LOG_LEVEL"] = settings.log_level

    try:
        uvicorn.run(
            "confgraph.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("check-data")
@click.argument("path", type=click.Path(dir_okay=False), required=False)
def check_data(path: str | None) -> None:
    """Validate a dataset file and report dangling references."""
    from confgraph.store import find_dangling_references, load_store

    configure_logging()
    path = path or get_data_path()

    try:
        store = load_store(path, strict_references=False)
    except DataLoadError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    for conference in store:
        click.echo(
            f"{conference.code}: {conference.name} - {len(conference.sessions)} sessions, "
            f"{len(conference.schedule)} schedule items"
        )

    problems = find_dangling_references(store)
    if problems:
        click.echo(f"✗ {len(problems)} dangling reference(s):", err=True)
        for problem in problems:
            click.echo(f"  {problem}", err=True)
        sys.exit(1)

    click.echo("✓ Dataset is consistent")


@cli.command("print-schema")
def print_schema() -> None:
    """Print the GraphQL schema in SDL."""
    from confgraph.graphql.schema import schema

    click.echo(schema.as_str())


@cli.command("encode-id")
@click.argument("type_name")
@click.argument("local_id")
def encode_id(type_name: str, local_id: str) -> None:
    """Encode TYPE_NAME and LOCAL_ID into a global ID."""
    from confgraph.relay import encode_global_id, node_type_for

    try:
        node_type_for(type_name)
        click.echo(encode_global_id(type_name, local_id))
    except ResolutionError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)


@cli.command("decode-id")
@click.argument("global_id")
def decode_id(global_id: str) -> None:
    """Decode GLOBAL_ID into its type name and local ID."""
    from confgraph.relay import decode_global_id

    try:
        decoded = decode_global_id(global_id)
    except ResolutionError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)
    click.echo(f"{decoded.type_name} {decoded.local_id}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
