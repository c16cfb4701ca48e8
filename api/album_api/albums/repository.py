"""
Album persistence (raw SQL).
"""

from __future__ import annotations

from decimal import Decimal

from album_api.core.db import Database


async def list_albums(database: Database) -> list[dict]:
    return await database.fetch_all(
        """
        SELECT id, title, artist, price
        FROM album
        """
    )


async def get_album(database: Database, album_id: str) -> dict | None:
    # The id arrives as raw path text; Postgres does the integer coercion.
    return await database.fetch_one(
        """
        SELECT id, title, artist, price
        FROM album
        WHERE id = $1::text::bigint
        """,
        album_id,
    )


async def insert_album(database: Database, *, title: str, artist: str, price: float) -> int:
    row = await database.fetch_one(
        """
        INSERT INTO album (title, artist, price)
        VALUES ($1, $2, $3)
        RETURNING id
        """,
        title,
        artist,
        Decimal(str(price)),
    )
    if row is None:
        raise RuntimeError("Failed to insert album.")
    return int(row["id"])
