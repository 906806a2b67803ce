from typing import ClassVar

from tmdb_api.common.video import VideosResult
from tmdb_api.core.command import Command


class MovieVideos(Command[VideosResult]):
    """Get the trailers, teasers and clips of a movie."""

    path_template: ClassVar[str] = "/movie/{movie_id}/videos"
    output: ClassVar = VideosResult

    movie_id: int
    language: str | None = None
