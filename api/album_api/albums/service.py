"""
Album business logic.

Every database or decode failure stops at this layer: it is logged with its
detail and replaced by a fixed client-facing message.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import status
from pydantic import ValidationError

from album_api.core.db import Database
from album_api.core.errors import ApiError

from . import repository, schemas

logger = logging.getLogger(__name__)

ERROR_GETTING_ALBUMS = "error getting albums"
ERROR_GETTING_ALBUM = "error getting album"
ERROR_ADDING_ALBUM = "error adding album"
ALBUM_NOT_FOUND = "album not found"


def _to_album(row: dict) -> schemas.Album:
    # Rows carry driver types (numeric -> Decimal), so validate leniently.
    return schemas.Album.model_validate(row, strict=False)


async def list_albums(database: Database) -> list[schemas.Album]:
    try:
        rows = await repository.list_albums(database)
        return [_to_album(row) for row in rows]
    except Exception as exc:
        logger.exception("list_albums failed")
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_GETTING_ALBUMS) from exc


async def get_album(database: Database, album_id: str) -> schemas.Album:
    try:
        row = await repository.get_album(database, album_id)
    except asyncpg.exceptions.DataError:
        # Text that is not an integer can never match a row.
        logger.info("get_album rejected id=%r", album_id)
        row = None
    except Exception as exc:
        logger.exception("get_album failed id=%r", album_id)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_GETTING_ALBUM) from exc

    if row is None:
        raise ApiError(status.HTTP_404_NOT_FOUND, ALBUM_NOT_FOUND)

    try:
        return _to_album(row)
    except ValidationError as exc:
        logger.exception("get_album decode failed id=%r", album_id)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_GETTING_ALBUM) from exc


def parse_album(body: bytes) -> schemas.AddAlbumRequest:
    """
    Decode a request body into an Album.

    Malformed JSON and type mismatches are reported as 500, the status
    existing clients of this API expect.
    """
    try:
        return schemas.AddAlbumRequest.model_validate_json(body)
    except ValidationError as exc:
        logger.info("add_album bad body: %s", exc.errors(include_url=False))
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_ADDING_ALBUM) from exc


async def add_album(database: Database, album: schemas.Album) -> int:
    """
    Insert title/artist/price and return the generated id. `album.id` is ignored.
    """
    try:
        return await repository.insert_album(
            database,
            title=album.title,
            artist=album.artist,
            price=album.price,
        )
    except Exception as exc:
        logger.exception("add_album failed")
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_ADDING_ALBUM) from exc
