from typing import ClassVar

from tmdb_api.common.paginated import PaginatedResult
from tmdb_api.common.review import Review
from tmdb_api.core.command import Command


class MovieReviewsResult(PaginatedResult[Review]):
    id: int


class MovieReviews(Command[MovieReviewsResult]):
    """Get the user reviews of a movie."""

    path_template: ClassVar[str] = "/movie/{movie_id}/reviews"
    output: ClassVar = MovieReviewsResult

    movie_id: int
    language: str | None = None
    page: int | None = None
