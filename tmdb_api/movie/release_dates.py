from datetime import datetime
from enum import IntEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from tmdb_api.common.types import OptionalStr
from tmdb_api.core.command import Command


class ReleaseType(IntEnum):
    PREMIERE = 1
    THEATRICAL_LIMITED = 2
    THEATRICAL = 3
    DIGITAL = 4
    PHYSICAL = 5
    TV = 6


class ReleaseDate(BaseModel):
    certification: OptionalStr = None
    descriptors: list[str] = Field(default_factory=list)
    iso_639_1: OptionalStr = None
    note: OptionalStr = None
    release_date: datetime
    kind: ReleaseType = Field(alias="type")

    model_config = ConfigDict(populate_by_name=True)


class CountryReleaseDates(BaseModel):
    iso_3166_1: str
    release_dates: list[ReleaseDate]


class MovieReleaseDatesResult(BaseModel):
    id: int
    results: list[CountryReleaseDates]


class MovieReleaseDates(Command[MovieReleaseDatesResult]):
    """Get the release dates and certifications of a movie, per country."""

    path_template: ClassVar[str] = "/movie/{movie_id}/release_dates"
    output: ClassVar = MovieReleaseDatesResult

    movie_id: int
