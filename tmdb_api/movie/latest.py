from typing import ClassVar

from tmdb_api.core.command import Command

from .details import MovieDetailsResult


class MovieLatest(Command[MovieDetailsResult]):
    """Get the most newly created movie. This is a live response."""

    path_template: ClassVar[str] = "/movie/latest"
    output: ClassVar = MovieDetailsResult
