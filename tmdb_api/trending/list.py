from enum import Enum
from typing import ClassVar

from tmdb_api.common.media import MovieShort, TVShowShort
from tmdb_api.common.paginated import PaginatedResult
from tmdb_api.core.command import Command


class TimeWindow(str, Enum):
    DAY = "day"
    WEEK = "week"


class TrendingMovies(Command[PaginatedResult[MovieShort]]):
    """Get the trending movies of the day or of the week."""

    path_template: ClassVar[str] = "/trending/movie/{time_window}"
    output: ClassVar = PaginatedResult[MovieShort]

    time_window: TimeWindow = TimeWindow.WEEK
    language: str | None = None
    page: int | None = None


class TrendingTVShows(Command[PaginatedResult[TVShowShort]]):
    """Get the trending TV shows of the day or of the week."""

    path_template: ClassVar[str] = "/trending/tv/{time_window}"
    output: ClassVar = PaginatedResult[TVShowShort]

    time_window: TimeWindow = TimeWindow.WEEK
    language: str | None = None
    page: int | None = None
