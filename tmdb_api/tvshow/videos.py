from typing import ClassVar

from tmdb_api.common.video import VideosResult
from tmdb_api.core.command import Command


class TVShowVideos(Command[VideosResult]):
    path_template: ClassVar[str] = "/tv/{tv_id}/videos"
    output: ClassVar = VideosResult

    tv_id: int
    language: str | None = None
