from datetime import date
from typing import ClassVar

from pydantic import Field

from tmdb_api.common.media import TVShowShort
from tmdb_api.common.paginated import PaginatedResult
from tmdb_api.core.command import Command


class TVShowDiscover(Command[PaginatedResult[TVShowShort]]):
    """Find TV shows using filters and sort options."""

    path_template: ClassVar[str] = "/discover/tv"
    output: ClassVar = PaginatedResult[TVShowShort]

    language: str | None = None
    page: int | None = None
    sort_by: str | None = None
    include_adult: bool | None = None

    first_air_date_year: int | None = None
    first_air_date_gte: date | None = Field(default=None, alias="first_air_date.gte")
    first_air_date_lte: date | None = Field(default=None, alias="first_air_date.lte")

    vote_average_gte: float | None = Field(default=None, alias="vote_average.gte")

    with_genres: str | None = None
    without_genres: str | None = None
    with_networks: str | None = None
    with_original_language: str | None = None
