"""
Client-facing API errors.

Handlers raise `ApiError`; the app turns it into `{"message": ...}` with the
given status code. Internal detail stays in the server log.
"""

from __future__ import annotations

from fastapi import Request

from .responses import IndentedJSONResponse


class ApiError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


async def api_error_handler(_: Request, exc: ApiError) -> IndentedJSONResponse:
    return IndentedJSONResponse({"message": exc.message}, status_code=exc.status_code)
