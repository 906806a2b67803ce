from typing import ClassVar

from pydantic import Field

from tmdb_api.common.media import MovieShort
from tmdb_api.common.paginated import PaginatedResult
from tmdb_api.core.command import Command


class MovieSearch(Command[PaginatedResult[MovieShort]]):
    """Search for movies by their original, translated and alternative titles."""

    path_template: ClassVar[str] = "/search/movie"
    output: ClassVar = PaginatedResult[MovieShort]

    query: str = Field(min_length=1)
    language: str | None = None
    page: int | None = None
    include_adult: bool | None = None
    # ISO 3166-1 code to filter release dates
    region: str | None = None
    year: int | None = None
    primary_release_year: int | None = None
