"""
loaders/orm_loader.py — grouped ORM inserts and deletes for the seed routine.

The loader:
  - Inserts one group of rows concurrently (asyncio.gather), one session
    and one transaction per row
  - Bounds in-flight inserts with a semaphore sized to the connection pool
    (SQLite allows a single writer, so it gets 1)
  - Deletes whole tables with plain DELETE statements
  - Counts rows per table for the status command
  - Returns a LoadResult per group with counts and timing

Failures are not retried or rolled back across rows; the first error
propagates to the caller.

Usage:
    from swc_seed.loaders.orm_loader import OrmLoader

    loader = OrmLoader()
    rows, result = await loader.create_many(orm.Technique, data.TECHNIQUES)
    print(result.records_loaded, [r.id for r in rows])
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from swc_shared.config import settings
from swc_shared.db import Base, get_sessionmaker
from swc_shared.models.base import InsertModel

log = structlog.get_logger(__name__)


@dataclass
class LoadResult:
    """Summary of one grouped insert or delete."""

    table: str
    records_loaded: int = 0
    records_deleted: int = 0
    duration_ms: int = 0


class OrmLoader:
    """Handles all writes from the seed routine."""

    def __init__(
        self,
        sessionmaker: async_sessionmaker[AsyncSession] | None = None,
        *,
        concurrency: int | None = None,
    ) -> None:
        self._sessionmaker = sessionmaker or get_sessionmaker()
        if concurrency is None:
            concurrency = 1 if settings.is_sqlite else settings.db_pool_size
        self._semaphore = asyncio.Semaphore(max(concurrency, 1))

    # ------------------------------------------------------------------
    # Inserts
    # ------------------------------------------------------------------

    async def create(self, table: type[Base], record: InsertModel) -> Any:
        """Insert one row in its own session and return the ORM instance."""
        async with self._semaphore:
            async with self._sessionmaker() as session:
                row = table(**record.to_insert_dict())
                session.add(row)
                await session.commit()
                return row

    async def create_many(
        self,
        table: type[Base],
        records: Sequence[InsertModel],
    ) -> tuple[list[Any], LoadResult]:
        """
        Insert every record of one group concurrently.

        Returned rows keep the order of `records`, so callers can index
        into them the same way they indexed the input.
        """
        result = LoadResult(table=table.__tablename__)
        t0 = time.monotonic()

        rows = await asyncio.gather(*(self.create(table, r) for r in records))

        result.records_loaded = len(rows)
        result.duration_ms = int((time.monotonic() - t0) * 1000)
        log.debug(
            "group_inserted",
            table=result.table,
            records_loaded=result.records_loaded,
            duration_ms=result.duration_ms,
        )
        return list(rows), result

    # ------------------------------------------------------------------
    # Deletes and counts
    # ------------------------------------------------------------------

    async def delete_all(self, tables: Sequence[type[Base]]) -> list[LoadResult]:
        """Delete every row of each table, in the order given."""
        results: list[LoadResult] = []
        async with self._sessionmaker() as session:
            for table in tables:
                t0 = time.monotonic()
                outcome = await session.execute(delete(table))
                await session.commit()
                result = LoadResult(
                    table=table.__tablename__,
                    records_deleted=max(outcome.rowcount, 0),
                    duration_ms=int((time.monotonic() - t0) * 1000),
                )
                log.debug("table_cleared", table=result.table, records_deleted=result.records_deleted)
                results.append(result)
        return results

    async def count_rows(self, tables: Sequence[type[Base]]) -> dict[str, int]:
        counts: dict[str, int] = {}
        async with self._sessionmaker() as session:
            for table in tables:
                counts[table.__tablename__] = (
                    await session.execute(select(func.count()).select_from(table))
                ).scalar_one()
        return counts
