from typing import ClassVar

from tmdb_api.common.media import TVShowShort
from tmdb_api.common.paginated import PaginatedResult
from tmdb_api.core.command import Command


class TVShowRecommendations(Command[PaginatedResult[TVShowShort]]):
    path_template: ClassVar[str] = "/tv/{tv_id}/recommendations"
    output: ClassVar = PaginatedResult[TVShowShort]

    tv_id: int
    language: str | None = None
    page: int | None = None


class TVShowSimilar(Command[PaginatedResult[TVShowShort]]):
    """Get TV shows similar to a TV show, matched on keywords and genres."""

    path_template: ClassVar[str] = "/tv/{tv_id}/similar"
    output: ClassVar = PaginatedResult[TVShowShort]

    tv_id: int
    language: str | None = None
    page: int | None = None
