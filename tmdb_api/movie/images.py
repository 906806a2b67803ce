from typing import ClassVar

from pydantic import BaseModel, Field

from tmdb_api.common.image import Image
from tmdb_api.core.command import Command


class MovieImagesResult(BaseModel):
    id: int
    backdrops: list[Image]
    posters: list[Image]
    logos: list[Image] = Field(default_factory=list)


class MovieImages(Command[MovieImagesResult]):
    """Get the images that belong to a movie."""

    path_template: ClassVar[str] = "/movie/{movie_id}/images"
    output: ClassVar = MovieImagesResult

    movie_id: int
    # ISO 639-1 value to display translated data for the fields that support it.
    language: str | None = None
