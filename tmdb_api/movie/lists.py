"""The curated movie lists: now playing, popular, top rated, upcoming."""

from typing import ClassVar

from tmdb_api.common.media import MovieShort
from tmdb_api.common.paginated import DatedPaginatedResult, PaginatedResult
from tmdb_api.core.command import Command


class MovieNowPlaying(Command[DatedPaginatedResult[MovieShort]]):
    """Get movies currently in theatres."""

    path_template: ClassVar[str] = "/movie/now_playing"
    output: ClassVar = DatedPaginatedResult[MovieShort]

    language: str | None = None
    page: int | None = None
    # ISO 3166-1 code to filter release dates
    region: str | None = None


class MovieUpcoming(Command[DatedPaginatedResult[MovieShort]]):
    """Get movies that are being released soon."""

    path_template: ClassVar[str] = "/movie/upcoming"
    output: ClassVar = DatedPaginatedResult[MovieShort]

    language: str | None = None
    page: int | None = None
    region: str | None = None


class MoviePopular(Command[PaginatedResult[MovieShort]]):
    """Get movies ordered by popularity."""

    path_template: ClassVar[str] = "/movie/popular"
    output: ClassVar = PaginatedResult[MovieShort]

    language: str | None = None
    page: int | None = None
    region: str | None = None


class MovieTopRated(Command[PaginatedResult[MovieShort]]):
    """Get movies ordered by rating."""

    path_template: ClassVar[str] = "/movie/top_rated"
    output: ClassVar = PaginatedResult[MovieShort]

    language: str | None = None
    page: int | None = None
    region: str | None = None
