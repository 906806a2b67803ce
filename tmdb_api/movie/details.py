from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field

from tmdb_api.common.company import CompanyShort
from tmdb_api.common.country import Country, SpokenLanguage
from tmdb_api.common.genre import Genre
from tmdb_api.common.types import OptionalDate, OptionalStr
from tmdb_api.core.command import Command


class MovieStatus(str, Enum):
    RUMORED = "Rumored"
    PLANNED = "Planned"
    IN_PRODUCTION = "In Production"
    POST_PRODUCTION = "Post Production"
    RELEASED = "Released"
    CANCELED = "Canceled"


class CollectionShort(BaseModel):
    id: int
    name: str
    poster_path: str | None = None
    backdrop_path: str | None = None


class MovieDetailsResult(BaseModel):
    id: int
    title: str
    original_title: str
    original_language: str
    overview: OptionalStr = None
    tagline: OptionalStr = None
    homepage: OptionalStr = None
    imdb_id: OptionalStr = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    release_date: OptionalDate = None
    status: MovieStatus | None = None
    adult: bool = False
    video: bool = False
    belongs_to_collection: CollectionShort | None = None

    # Money and runtime are 0 when unknown
    budget: int = 0
    revenue: int = 0
    runtime: int | None = None

    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0

    genres: list[Genre] = Field(default_factory=list)
    origin_country: list[str] = Field(default_factory=list)
    production_companies: list[CompanyShort] = Field(default_factory=list)
    production_countries: list[Country] = Field(default_factory=list)
    spoken_languages: list[SpokenLanguage] = Field(default_factory=list)


class MovieDetails(Command[MovieDetailsResult]):
    """Get the primary information about a movie."""

    path_template: ClassVar[str] = "/movie/{movie_id}"
    output: ClassVar = MovieDetailsResult

    movie_id: int
    # ISO 639-1 value to display translated data for the fields that support it.
    language: str | None = None
