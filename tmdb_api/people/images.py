from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.image import Image
from tmdb_api.core.command import Command


class PersonImagesResult(BaseModel):
    id: int
    profiles: list[Image]


class PersonImages(Command[PersonImagesResult]):
    """Get the profile images of a person."""

    path_template: ClassVar[str] = "/person/{person_id}/images"
    output: ClassVar = PersonImagesResult

    person_id: int
