from pydantic import BaseModel, ConfigDict, Field

from .types import OptionalDateTime, OptionalStr


class Video(BaseModel):
    id: str
    iso_639_1: OptionalStr = None
    iso_3166_1: OptionalStr = None
    name: str
    key: str
    site: str
    size: int
    kind: str = Field(alias="type")
    official: bool = False
    published_at: OptionalDateTime = None

    model_config = ConfigDict(populate_by_name=True)


class VideosResult(BaseModel):
    id: int
    results: list[Video]
