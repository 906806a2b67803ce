from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from tmdb_api.common.types import OptionalStr
from tmdb_api.core.command import Command


class MovieAlternativeTitle(BaseModel):
    iso_3166_1: str
    title: str
    kind: OptionalStr = Field(default=None, alias="type")

    model_config = ConfigDict(populate_by_name=True)


class MovieAlternativeTitlesResult(BaseModel):
    id: int
    titles: list[MovieAlternativeTitle]


class MovieAlternativeTitles(Command[MovieAlternativeTitlesResult]):
    """Get all of the alternative titles for a movie."""

    path_template: ClassVar[str] = "/movie/{movie_id}/alternative_titles"
    output: ClassVar = MovieAlternativeTitlesResult

    movie_id: int
    # ISO 3166-1 code to restrict the titles to one country
    country: str | None = None
