from typing import ClassVar

from pydantic import BaseModel, Field

from tmdb_api.core.command import Command


class ContentRating(BaseModel):
    iso_3166_1: str
    rating: str
    descriptors: list[str] = Field(default_factory=list)


class TVShowContentRatingsResult(BaseModel):
    id: int
    results: list[ContentRating]


class TVShowContentRatings(Command[TVShowContentRatingsResult]):
    path_template: ClassVar[str] = "/tv/{tv_id}/content_ratings"
    output: ClassVar = TVShowContentRatingsResult

    tv_id: int
