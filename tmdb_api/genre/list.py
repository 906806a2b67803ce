from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.genre import Genre
from tmdb_api.core.command import Command


class GenresResult(BaseModel):
    genres: list[Genre]


class MovieGenres(Command[GenresResult]):
    """Get the list of official genres for movies."""

    path_template: ClassVar[str] = "/genre/movie/list"
    output: ClassVar = GenresResult

    language: str | None = None


class TVShowGenres(Command[GenresResult]):
    """Get the list of official genres for TV shows."""

    path_template: ClassVar[str] = "/genre/tv/list"
    output: ClassVar = GenresResult

    language: str | None = None
