"""The curated TV show lists: airing today, on the air, popular, top rated."""

from typing import ClassVar

from tmdb_api.common.media import TVShowShort
from tmdb_api.common.paginated import PaginatedResult
from tmdb_api.core.command import Command


class TVShowAiringToday(Command[PaginatedResult[TVShowShort]]):
    """Get TV shows airing today, in the given timezone."""

    path_template: ClassVar[str] = "/tv/airing_today"
    output: ClassVar = PaginatedResult[TVShowShort]

    language: str | None = None
    page: int | None = None
    timezone: str | None = None


class TVShowOnTheAir(Command[PaginatedResult[TVShowShort]]):
    """Get TV shows that air in the next 7 days."""

    path_template: ClassVar[str] = "/tv/on_the_air"
    output: ClassVar = PaginatedResult[TVShowShort]

    language: str | None = None
    page: int | None = None
    timezone: str | None = None


class TVShowPopular(Command[PaginatedResult[TVShowShort]]):
    path_template: ClassVar[str] = "/tv/popular"
    output: ClassVar = PaginatedResult[TVShowShort]

    language: str | None = None
    page: int | None = None


class TVShowTopRated(Command[PaginatedResult[TVShowShort]]):
    path_template: ClassVar[str] = "/tv/top_rated"
    output: ClassVar = PaginatedResult[TVShowShort]

    language: str | None = None
    page: int | None = None
