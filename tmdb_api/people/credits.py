"""Movie and TV credits of a person."""

from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.media import MovieShort, TVShowShort
from tmdb_api.core.command import Command


class PersonMovieCast(MovieShort):
    character: str = ""
    credit_id: str
    order: int | None = None


class PersonMovieCrew(MovieShort):
    credit_id: str
    department: str
    job: str


class PersonMovieCreditsResult(BaseModel):
    id: int
    cast: list[PersonMovieCast]
    crew: list[PersonMovieCrew]


class PersonTVCast(TVShowShort):
    character: str = ""
    credit_id: str
    episode_count: int | None = None


class PersonTVCrew(TVShowShort):
    credit_id: str
    department: str
    job: str
    episode_count: int | None = None


class PersonTVCreditsResult(BaseModel):
    id: int
    cast: list[PersonTVCast]
    crew: list[PersonTVCrew]


class PersonMovieCredits(Command[PersonMovieCreditsResult]):
    path_template: ClassVar[str] = "/person/{person_id}/movie_credits"
    output: ClassVar = PersonMovieCreditsResult

    person_id: int
    language: str | None = None


class PersonTVCredits(Command[PersonTVCreditsResult]):
    path_template: ClassVar[str] = "/person/{person_id}/tv_credits"
    output: ClassVar = PersonTVCreditsResult

    person_id: int
    language: str | None = None
