from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.genre import Keyword
from tmdb_api.core.command import Command


class TVShowKeywordsResult(BaseModel):
    id: int
    # the TV endpoint names the list "results", the movie one "keywords"
    results: list[Keyword]


class TVShowKeywords(Command[TVShowKeywordsResult]):
    path_template: ClassVar[str] = "/tv/{tv_id}/keywords"
    output: ClassVar = TVShowKeywordsResult

    tv_id: int
