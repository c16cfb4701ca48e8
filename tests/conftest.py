from __future__ import annotations

from decimal import Decimal

import anyio
import asyncpg
import pytest
from fastapi.testclient import TestClient

from album_api.main import create_app


class FakeDatabase:
    """
    In-memory stand-in for `album_api.core.db.Database` that understands the album
    statements issued by `album_api.albums.repository`.
    """

    def __init__(self, rows: list[dict] | None = None) -> None:
        self.rows = [dict(r) for r in rows or []]
        self.next_id = max((int(r["id"]) for r in self.rows), default=0) + 1
        self.fail_with: Exception | None = None
        self.statements: list[tuple[str, tuple]] = []

    def _record(self, sql: str, args: tuple) -> None:
        self.statements.append((" ".join(sql.split()), args))
        if self.fail_with is not None:
            raise self.fail_with

    async def fetch_all(self, sql: str, *args):
        self._record(sql, args)
        await anyio.sleep(0)
        return [dict(r) for r in self.rows]

    async def fetch_one(self, sql: str, *args):
        self._record(sql, args)
        await anyio.sleep(0)

        if sql.lstrip().upper().startswith("INSERT"):
            title, artist, price = args
            row = {"id": self.next_id, "title": title, "artist": artist, "price": price}
            self.next_id += 1
            self.rows.append(row)
            return {"id": row["id"]}

        raw_id = args[0]
        try:
            wanted = int(raw_id)
        except ValueError:
            raise asyncpg.exceptions.InvalidTextRepresentationError(
                f'invalid input syntax for type bigint: "{raw_id}"'
            ) from None
        for row in self.rows:
            if int(row["id"]) == wanted:
                return dict(row)
        return None


SAMPLE_ROWS = [
    {"id": 1, "title": "Blue Train", "artist": "John Coltrane", "price": Decimal("56.99")},
    {"id": 2, "title": "Giant Steps", "artist": "John Coltrane", "price": Decimal("63.99")},
    {"id": 3, "title": "Jeru", "artist": "Gerry Mulligan", "price": Decimal("17.99")},
]


@pytest.fixture
def database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def seeded_database() -> FakeDatabase:
    return FakeDatabase(SAMPLE_ROWS)


@pytest.fixture
def client(database: FakeDatabase):
    with TestClient(create_app(database=database)) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(seeded_database: FakeDatabase):
    with TestClient(create_app(database=seeded_database)) as test_client:
        yield test_client


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
