from typing import ClassVar

from pydantic import Field

from tmdb_api.common.media import TVShowShort
from tmdb_api.common.paginated import PaginatedResult
from tmdb_api.core.command import Command


class TVShowSearch(Command[PaginatedResult[TVShowShort]]):
    """Search for TV shows by their original, translated and also known as names."""

    path_template: ClassVar[str] = "/search/tv"
    output: ClassVar = PaginatedResult[TVShowShort]

    query: str = Field(min_length=1)
    language: str | None = None
    page: int | None = None
    include_adult: bool | None = None
    first_air_date_year: int | None = None
