from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.watch_provider import WatchProvider
from tmdb_api.core.command import Command


class WatchProviderListResult(BaseModel):
    results: list[WatchProvider]


class WatchProviderMovieList(Command[WatchProviderListResult]):
    """Get the watch providers known for movies."""

    path_template: ClassVar[str] = "/watch/providers/movie"
    output: ClassVar = WatchProviderListResult

    language: str | None = None
    # ISO 3166-1 code to restrict the list to one country
    watch_region: str | None = None


class WatchProviderTVList(Command[WatchProviderListResult]):
    """Get the watch providers known for TV shows."""

    path_template: ClassVar[str] = "/watch/providers/tv"
    output: ClassVar = WatchProviderListResult

    language: str | None = None
    watch_region: str | None = None
