from pydantic import BaseModel, Field

from .types import OptionalDate, OptionalStr


class MovieShort(BaseModel):
    """A movie as it appears in lists, searches and collections."""

    id: int
    title: str
    original_title: str
    original_language: str
    overview: OptionalStr = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    release_date: OptionalDate = None
    adult: bool = False
    video: bool = False
    genre_ids: list[int] = Field(default_factory=list)
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0


class TVShowShort(BaseModel):
    """A TV show as it appears in lists and searches."""

    id: int
    name: str
    original_name: str
    original_language: str
    overview: OptionalStr = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    first_air_date: OptionalDate = None
    origin_country: list[str] = Field(default_factory=list)
    adult: bool = False
    genre_ids: list[int] = Field(default_factory=list)
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
