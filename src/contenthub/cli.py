#!/usr/bin/env python3
"""
Main CLI entry point for the contenthub backend server.
"""

import json
import os
import sys

import click
import uvicorn

from contenthub import __version__
from contenthub.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="contenthub")
def cli() -> None:
    """contenthub CLI - run the server, inspect permissions, manage users."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=4000, type=int, help="Port to bind to (default: 4000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option("--workers", default=1, type=int, help="Number of worker processes (default: 1)")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the contenthub API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting contenthub API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    if log_level == "debug":
        os.environ["CONTENTHUB_DEBUG"] = "true"
        os.environ["CONTENTHUB_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("CONTENTHUB_DEBUG", "false")
        os.environ.setdefault("CONTENTHUB_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "contenthub.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            workers=(workers if not reload else 1),
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
    "--category",
    type=click.Choice(["query", "mutation"]),
    default=None,
    help="Only show one operation category",
)
def policy(category: str | None) -> None:
    """Print the permission rule of every operation as JSON."""
    from contenthub.authz.policy import permissions

    table = permissions.describe()
    if category:
        table = {category: table[category]}
    click.echo(json.dumps(table, indent=2, sort_keys=True))


@cli.group()
def user() -> None:
    """Manage user roles."""
    pass


@user.command("grant-role")
@click.option("--email", required=True, help="Email of the user")
@click.option("--role", default="ADMIN", show_default=True, help="Role to add")
def grant_role(email: str, role: str) -> None:
    """Add a role to a user."""
    import asyncio

    from contenthub.repository.roles import add_role

    configure_logging()

    roles = asyncio.run(add_role(email, role))
    if roles is None:
        click.echo(f"✗ No user found for email: {email}", err=True)
        sys.exit(1)
    click.echo(f"✓ Roles for {email}: {', '.join(roles)}")


@user.command("revoke-role")
@click.option("--email", required=True, help="Email of the user")
@click.option("--role", default="ADMIN", show_default=True, help="Role to remove")
def revoke_role(email: str, role: str) -> None:
    """Remove a role from a user."""
    import asyncio

    from contenthub.repository.roles import remove_role

    configure_logging()

    roles = asyncio.run(remove_role(email, role))
    if roles is None:
        click.echo(f"✗ No user found for email: {email}", err=True)
        sys.exit(1)
    click.echo(f"✓ Roles for {email}: {', '.join(roles) or '(none)'}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
