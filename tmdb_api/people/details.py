from typing import ClassVar

from pydantic import BaseModel, Field

from tmdb_api.common.types import OptionalDate, OptionalStr
from tmdb_api.core.command import Command


class PersonDetailsResult(BaseModel):
    id: int
    name: str
    also_known_as: list[str] = Field(default_factory=list)
    adult: bool = False
    biography: OptionalStr = None
    birthday: OptionalDate = None
    deathday: OptionalDate = None
    gender: int | None = None
    homepage: OptionalStr = None
    imdb_id: OptionalStr = None
    known_for_department: OptionalStr = None
    place_of_birth: OptionalStr = None
    popularity: float = 0.0
    profile_path: str | None = None


class PersonDetails(Command[PersonDetailsResult]):
    """Get the primary person details by id."""

    path_template: ClassVar[str] = "/person/{person_id}"
    output: ClassVar = PersonDetailsResult

    person_id: int
    language: str | None = None
