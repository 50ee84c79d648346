#!/usr/bin/env python3
"""
Schema migration commands (``contenthub-migrate``), backed by Alembic.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from contenthub import __version__
from contenthub.logging import configure_logging, get_logger

logger = get_logger(__name__)

# Source checkout; installed wheels do not ship alembic.ini
REPO_ROOT = Path(__file__).resolve().parents[3]


def find_alembic_ini(ini_path: Path | None = None) -> Path:
    """Explicit path first, then the working directory, then the source checkout."""
    if ini_path is not None:
        candidates = [Path(ini_path)]
    else:
        candidates = [Path.cwd() / "alembic.ini", REPO_ROOT / "alembic.ini"]

    for candidate in candidates:
        if candidate.is_file():
            return candidate.resolve()

    searched = ", ".join(str(c) for c in candidates)
    raise FileNotFoundError(f"alembic.ini not found (searched: {searched})")


def get_alembic_config(ini_path: Path | None = None) -> Config:
    """Load alembic.ini, resolving script_location against the file's directory."""
    alembic_ini = find_alembic_ini(ini_path)

    config = Config(str(alembic_ini))
    script_location = Path(config.get_main_option("script_location") or "alembic")
    if not script_location.is_absolute():
        script_location = alembic_ini.parent / script_location
    config.set_main_option("script_location", str(script_location))
    return config


def _run(description: str, fn: Callable[[Config], None], **log_fields) -> None:
    ini_path = click.get_current_context().find_root().obj
    try:
        config = get_alembic_config(ini_path)
        logger.info(f"{description} started", config=config.config_file_name, **log_fields)
        fn(config)
        logger.info(f"{description} completed", **log_fields)
    except Exception as e:
        logger.error(f"{description} failed", error=str(e), **log_fields)
        sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option(
    "--config",
    "config_path",
    envvar="CONTENTHUB_ALEMBIC_CONFIG",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to alembic.ini (default: ./alembic.ini, then the source checkout)",
)
@click.version_option(version=__version__, prog_name="contenthub-migrate")
@click.pass_context
def main(ctx: click.Context, log_level: str, config_path: Path | None) -> None:
    """Manage the contenthub database schema."""
    configure_logging(debug=(log_level == "debug"))
    ctx.obj = config_path


@main.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade the schema to REVISION (default: head)."""
    _run("Schema upgrade", lambda cfg: command.upgrade(cfg, revision), revision=revision)


@main.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade the schema to REVISION (default: -1)."""
    _run("Schema downgrade", lambda cfg: command.downgrade(cfg, revision), revision=revision)


@main.command()
@click.option("-m", "--message", required=True, help="Revision message")
@click.option("--autogenerate/--no-autogenerate", default=True, help="Diff against the ORM models")
def revision(message: str, autogenerate: bool) -> None:
    """Create a new migration revision."""
    _run(
        "Revision generation",
        lambda cfg: command.revision(cfg, message=message, autogenerate=autogenerate),
        message=message,
        autogenerate=autogenerate,
    )


@main.command()
def current() -> None:
    """Show the revision the database is at."""
    _run("Current revision lookup", command.current)


@main.command()
def history() -> None:
    """Show migration history."""
    _run("History listing", command.history)


if __name__ == "__main__":
    main()
