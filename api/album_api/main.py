from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from album_api.albums import router as albums_router
from album_api.core import config, db, logs
from album_api.core.errors import ApiError, api_error_handler
from album_api.core.responses import IndentedJSONResponse

logger = logging.getLogger(__name__)


def create_app(
    *,
    database: db.Database | None = None,
    database_config: config.DatabaseConfig | None = None,
) -> FastAPI:
    """
    Build the application.

    With `database` given, that handle is used as-is and left open on
    shutdown. Otherwise a pool is opened from `database_config` (or the
    environment) during startup; a failed connect or ping aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if database is not None:
            yield
            return

        app.state.database = await db.Database.connect(database_config or config.DatabaseConfig.from_env())
        logger.info("Connected!")
        try:
            yield
        finally:
            await app.state.database.close()
            app.state.database = None

    app = FastAPI(lifespan=lifespan, default_response_class=IndentedJSONResponse)
    app.state.database = database

    app.middleware("http")(logs.log_requests)
    app.add_exception_handler(ApiError, api_error_handler)

    app.include_router(albums_router.router, tags=["albums"])
    return app


app = create_app()


def run() -> None:
    logs.configure_logging()
    uvicorn.run(app, host=config.listen_host(), port=config.listen_port())


if __name__ == "__main__":
    run()
