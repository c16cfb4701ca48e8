"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. The application factory opens it on
startup, stores it on `app.state.database` and closes it on shutdown (see
`album_api/main.py`). Handlers receive it through the `get_database` dependency.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg
from fastapi import Request

from .config import DatabaseConfig

logger = logging.getLogger(__name__)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def connect(cls, config: DatabaseConfig) -> Database:
        """
        Create the pool and verify the server answers.

        Either failure propagates; there is no reconnect policy.
        """
        pool = await asyncpg.create_pool(**config.connect_kwargs())
        database = cls(pool)
        try:
            await database.ping()
        except BaseException:
            await pool.close()
            raise
        return database

    async def ping(self) -> None:
        await self._pool.fetchval("SELECT 1")

    async def close(self) -> None:
        await self._pool.close()

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self._pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self._pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]


def get_database(request: Request) -> Database:
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database is not initialized. Start the app through its lifespan.")
    return database
