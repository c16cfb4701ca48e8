"""
FastAPI router for album endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from album_api.core.db import Database, get_database
from album_api.core.responses import IndentedJSONResponse

from . import schemas, service

router = APIRouter()


@router.get("/albums", response_model=list[schemas.Album])
async def list_albums(database: Database = Depends(get_database)) -> list[schemas.Album]:
    """
    Every album in the table, in database order.
    """
    return await service.list_albums(database)


@router.get("/albums/{album_id}", response_model=schemas.Album)
async def get_album(album_id: str, database: Database = Depends(get_database)) -> schemas.Album:
    return await service.get_album(database, album_id)


@router.post("/albums", status_code=status.HTTP_201_CREATED)
async def add_album(request: Request, database: Database = Depends(get_database)) -> IndentedJSONResponse:
    """
    Add an album from the JSON body.

    The body is decoded by hand so binding errors keep the legacy 500
    response instead of FastAPI's 422.
    """
    album = service.parse_album(await request.body())
    album_id = await service.add_album(database, album)
    return IndentedJSONResponse(
        None,
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"/albums/{album_id}"},
    )
