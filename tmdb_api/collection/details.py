from typing import ClassVar

from pydantic import BaseModel, Field

from tmdb_api.common.media import MovieShort
from tmdb_api.common.types import OptionalStr
from tmdb_api.core.command import Command


class CollectionDetailsResult(BaseModel):
    id: int
    name: str
    overview: OptionalStr = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    parts: list[MovieShort] = Field(default_factory=list)


class CollectionDetails(Command[CollectionDetailsResult]):
    """Get collection details by id."""

    path_template: ClassVar[str] = "/collection/{collection_id}"
    output: ClassVar = CollectionDetailsResult

    collection_id: int
    # ISO 639-1 value to display translated data for the fields that support it.
    language: str | None = None
