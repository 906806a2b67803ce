from datetime import date
from typing import ClassVar

from pydantic import Field

from tmdb_api.common.media import MovieShort
from tmdb_api.common.paginated import PaginatedResult
from tmdb_api.core.command import Command


class MovieDiscover(Command[PaginatedResult[MovieShort]]):
    """Find movies using filters and sort options.

    Range filters use TMDB's dotted parameter names on the wire
    (``vote_average.gte``); build them with the underscored field names:

        MovieDiscover(with_original_language="te", vote_average_gte=7.0)

    Genre, keyword and company filters take comma separated ids for AND,
    pipe separated ids for OR.
    """

    path_template: ClassVar[str] = "/discover/movie"
    output: ClassVar = PaginatedResult[MovieShort]

    language: str | None = None
    page: int | None = None
    region: str | None = None
    sort_by: str | None = None  # e.g. "popularity.desc"

    # Content filters
    include_adult: bool | None = None
    include_video: bool | None = None

    # Date filters
    primary_release_year: int | None = None
    year: int | None = None
    primary_release_date_gte: date | None = Field(
        default=None, alias="primary_release_date.gte"
    )
    primary_release_date_lte: date | None = Field(
        default=None, alias="primary_release_date.lte"
    )

    # Rating filters
    vote_average_gte: float | None = Field(default=None, alias="vote_average.gte")
    vote_count_gte: int | None = Field(default=None, alias="vote_count.gte")

    # Runtime filters
    with_runtime_gte: int | None = Field(default=None, alias="with_runtime.gte")
    with_runtime_lte: int | None = Field(default=None, alias="with_runtime.lte")

    # Genre filters
    with_genres: str | None = None
    without_genres: str | None = None

    # Company/keyword filters
    with_companies: str | None = None
    with_keywords: str | None = None
    without_keywords: str | None = None

    # Origin filters
    with_origin_country: str | None = None
    with_original_language: str | None = None
