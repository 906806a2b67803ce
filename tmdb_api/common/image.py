from pydantic import BaseModel

from .types import OptionalStr


class Image(BaseModel):
    aspect_ratio: float
    file_path: str
    height: int
    width: int
    iso_639_1: OptionalStr = None
    vote_average: float = 0.0
    vote_count: int = 0


class Logo(Image):
    id: str | None = None
    file_type: str | None = None  # ".svg", ".png"
