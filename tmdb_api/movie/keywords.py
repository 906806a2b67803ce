from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.genre import Keyword
from tmdb_api.core.command import Command


class MovieKeywordsResult(BaseModel):
    id: int
    keywords: list[Keyword]


class MovieKeywords(Command[MovieKeywordsResult]):
    path_template: ClassVar[str] = "/movie/{movie_id}/keywords"
    output: ClassVar = MovieKeywordsResult

    movie_id: int
