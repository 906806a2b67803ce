from typing import ClassVar

from tmdb_api.common.watch_provider import WatchProvidersResult
from tmdb_api.core.command import Command


class MovieWatchProviders(Command[WatchProvidersResult]):
    """Get where a movie can be streamed, rented or bought, per country.

    Data is provided by JustWatch.
    """

    path_template: ClassVar[str] = "/movie/{movie_id}/watch/providers"
    output: ClassVar = WatchProvidersResult

    movie_id: int
