from typing import ClassVar

from tmdb_api.common.watch_provider import WatchProvidersResult
from tmdb_api.core.command import Command


class TVShowWatchProviders(Command[WatchProvidersResult]):
    path_template: ClassVar[str] = "/tv/{tv_id}/watch/providers"
    output: ClassVar = WatchProvidersResult

    tv_id: int
