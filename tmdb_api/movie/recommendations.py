from typing import ClassVar

from tmdb_api.common.media import MovieShort
from tmdb_api.common.paginated import PaginatedResult
from tmdb_api.core.command import Command


class MovieRecommendations(Command[PaginatedResult[MovieShort]]):
    """Get a list of recommended movies for a movie."""

    path_template: ClassVar[str] = "/movie/{movie_id}/recommendations"
    output: ClassVar = PaginatedResult[MovieShort]

    movie_id: int
    language: str | None = None
    page: int | None = None


class MovieSimilar(Command[PaginatedResult[MovieShort]]):
    """Get movies similar to a movie, matched on keywords and genres."""

    path_template: ClassVar[str] = "/movie/{movie_id}/similar"
    output: ClassVar = PaginatedResult[MovieShort]

    movie_id: int
    language: str | None = None
    page: int | None = None
