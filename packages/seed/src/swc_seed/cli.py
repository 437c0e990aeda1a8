"""
cli.py — Click CLI entrypoint for the seed routine.

Usage:
    swc-seed run
    swc-seed run --no-reset
    swc-seed status
"""

from __future__ import annotations

import asyncio
import sys

import click
import structlog

from swc_shared import orm
from swc_shared.config import settings
from swc_shared.db import dispose_engine, init_db
from swc_shared.logging import configure_logging

log = structlog.get_logger(__name__)


async def _seed(reset_first: bool, create_schema: bool) -> dict[str, int]:
    from swc_seed.seeder import run as run_seed

    try:
        if create_schema:
            await init_db()
        result = await run_seed(reset_first=reset_first)
        return result.counts
    finally:
        await dispose_engine()


async def _status() -> dict[str, int]:
    from swc_seed.loaders.orm_loader import OrmLoader

    try:
        return await OrmLoader().count_rows(tuple(reversed(orm.DELETE_ORDER)))
    finally:
        await dispose_engine()


@click.group()
@click.option(
    "--log-level",
    default=settings.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Log level",
)
def main(log_level: str) -> None:
    """SWC platform seed routine."""
    configure_logging(log_level=log_level)


@main.command()
@click.option("--reset/--no-reset", default=True, help="Delete all rows before inserting")
@click.option(
    "--create-schema/--no-create-schema",
    default=True,
    help="Create missing tables before seeding",
)
def run(reset: bool, create_schema: bool) -> None:
    """Insert the sample records."""
    click.echo("Starting seed...")
    try:
        counts = asyncio.run(_seed(reset, create_schema))
    except Exception as exc:
        log.error("seed_failed", error=str(exc), exc_info=True)
        sys.exit(1)

    for table, count in counts.items():
        click.echo(f"  Created {count} {table.replace('_', ' ')}")
    click.echo("Seeding completed successfully!")


@main.command()
def status() -> None:
    """Show the row count of every table."""
    try:
        counts = asyncio.run(_status())
    except Exception as exc:
        log.error("status_failed", error=str(exc))
        sys.exit(1)

    click.echo("Row counts:")
    for table, count in counts.items():
        click.echo(f"  {table:24s} {count}")


if __name__ == "__main__":
    main()
