from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.image import Image
from tmdb_api.core.command import Command


class CollectionImagesResult(BaseModel):
    id: int
    backdrops: list[Image]
    posters: list[Image]


class CollectionImages(Command[CollectionImagesResult]):
    """Get the images that belong to a collection.

    ``include_image_language`` takes a list of ISO 639-1 codes, plus
    ``"null"`` for images without text.
    """

    path_template: ClassVar[str] = "/collection/{collection_id}/images"
    output: ClassVar = CollectionImagesResult

    collection_id: int
    language: str | None = None
    include_image_language: list[str] | None = None
