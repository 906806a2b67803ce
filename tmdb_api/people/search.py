from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, Field

from tmdb_api.common.credits import PersonShort
from tmdb_api.common.media import MovieShort, TVShowShort
from tmdb_api.common.paginated import PaginatedResult
from tmdb_api.core.command import Command


class KnownForMovie(MovieShort):
    media_type: Literal["movie"]


class KnownForTVShow(TVShowShort):
    media_type: Literal["tv"]


KnownFor = Annotated[
    Union[KnownForMovie, KnownForTVShow], Field(discriminator="media_type")
]


class PersonResult(PersonShort):
    known_for: list[KnownFor] = Field(default_factory=list)


class PersonSearch(Command[PaginatedResult[PersonResult]]):
    """Search for people by their name and also known as names."""

    path_template: ClassVar[str] = "/search/person"
    output: ClassVar = PaginatedResult[PersonResult]

    query: str = Field(min_length=1)
    language: str | None = None
    page: int | None = None
    include_adult: bool | None = None
