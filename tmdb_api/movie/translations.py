from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.types import OptionalStr
from tmdb_api.core.command import Command


class MovieTranslationData(BaseModel):
    title: OptionalStr = None
    overview: OptionalStr = None
    homepage: OptionalStr = None
    tagline: OptionalStr = None
    runtime: int | None = None


class MovieTranslation(BaseModel):
    iso_3166_1: str
    iso_639_1: str
    name: OptionalStr = None
    english_name: str
    data: MovieTranslationData


class MovieTranslationsResult(BaseModel):
    id: int
    translations: list[MovieTranslation]


class MovieTranslations(Command[MovieTranslationsResult]):
    path_template: ClassVar[str] = "/movie/{movie_id}/translations"
    output: ClassVar = MovieTranslationsResult

    movie_id: int
