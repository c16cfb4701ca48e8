"""
Album record schema.

Field names and order match the `album` table columns and the JSON wire
shape: id, title, artist, price.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class Album(BaseModel):
    # Strict so that e.g. {"title": 123} is a binding error rather than "123".
    # NaN/Infinity would be stored but could never be rendered back as JSON.
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    id: int = 0
    title: str = ""
    artist: str = ""
    price: float = 0.0


class AddAlbumRequest(Album):
    """
    POST body. A JSON null leaves the field at its zero value, same as an
    absent field.
    """

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value
