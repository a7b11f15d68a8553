import uuid
from datetime import datetime
from typing import ClassVar

from pydantic import Field, field_validator

from app.schemas.base import BaseSchema, TimestampedSchema, UpdateSchema
from app.schemas.enums import MediaType

MIN_RELEASE_YEAR = 1800


def _check_release_year(value: int | None) -> int | None:
    # upper bound moves with the calendar, so it is checked per request
    if value is not None and value > datetime.now().year:
        raise ValueError(f"releaseYear must not be later than {datetime.now().year}")
    return value


class MediaCreate(BaseSchema):
    title: str = Field(..., min_length=1)
    description: str | None = None
    type: MediaType = MediaType.movie
    release_year: int = Field(..., ge=MIN_RELEASE_YEAR, strict=True)
    genre: str

    @field_validator("release_year")
    @classmethod
    def release_year_not_in_future(cls, value):
        return _check_release_year(value)


class MediaUpdate(UpdateSchema):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"description"})

    title: str | None = Field(None, min_length=1)
    description: str | None = None
    type: MediaType | None = None
    release_year: int | None = Field(None, ge=MIN_RELEASE_YEAR, strict=True)
    genre: str | None = None

    @field_validator("release_year")
    @classmethod
    def release_year_not_in_future(cls, value):
        return _check_release_year(value)


class MediaRead(TimestampedSchema):
    id: uuid.UUID
    title: str
    description: str | None = None
    type: MediaType
    release_year: int
    genre: str
