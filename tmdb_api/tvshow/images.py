from typing import ClassVar

from pydantic import BaseModel, Field

from tmdb_api.common.image import Image
from tmdb_api.core.command import Command


class TVShowImagesResult(BaseModel):
    id: int
    backdrops: list[Image]
    posters: list[Image]
    logos: list[Image] = Field(default_factory=list)


class TVShowImages(Command[TVShowImagesResult]):
    """Get the images that belong to a TV show."""

    path_template: ClassVar[str] = "/tv/{tv_id}/images"
    output: ClassVar = TVShowImagesResult

    tv_id: int
    language: str | None = None
