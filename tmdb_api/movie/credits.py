from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.credits import Cast, Crew
from tmdb_api.core.command import Command


class MovieCreditsResult(BaseModel):
    id: int
    cast: list[Cast]
    crew: list[Crew]


class MovieCredits(Command[MovieCreditsResult]):
    """Get the cast and crew of a movie."""

    path_template: ClassVar[str] = "/movie/{movie_id}/credits"
    output: ClassVar = MovieCreditsResult

    movie_id: int
    language: str | None = None
