from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from tmdb_api.common.company import CompanyShort, NetworkShort
from tmdb_api.common.country import Country, SpokenLanguage
from tmdb_api.common.genre import Genre
from tmdb_api.common.types import OptionalDate, OptionalStr
from tmdb_api.core.command import Command

from .episode import EpisodeShort
from .season import SeasonShort


class TVShowCreator(BaseModel):
    id: int
    credit_id: str
    name: str
    gender: int | None = None
    profile_path: str | None = None


class TVShowDetailsResult(BaseModel):
    id: int
    name: str
    original_name: str
    original_language: str
    overview: OptionalStr = None
    tagline: OptionalStr = None
    homepage: OptionalStr = None
    status: OptionalStr = None  # "Returning Series", "Ended", ...
    kind: OptionalStr = Field(default=None, alias="type")
    adult: bool = False
    in_production: bool = False
    poster_path: str | None = None
    backdrop_path: str | None = None

    first_air_date: OptionalDate = None
    last_air_date: OptionalDate = None
    number_of_episodes: int | None = None
    number_of_seasons: int | None = None
    episode_run_time: list[int] = Field(default_factory=list)

    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0

    created_by: list[TVShowCreator] = Field(default_factory=list)
    genres: list[Genre] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    origin_country: list[str] = Field(default_factory=list)
    networks: list[NetworkShort] = Field(default_factory=list)
    production_companies: list[CompanyShort] = Field(default_factory=list)
    production_countries: list[Country] = Field(default_factory=list)
    spoken_languages: list[SpokenLanguage] = Field(default_factory=list)
    seasons: list[SeasonShort] = Field(default_factory=list)
    last_episode_to_air: EpisodeShort | None = None
    next_episode_to_air: EpisodeShort | None = None

    model_config = ConfigDict(populate_by_name=True)


class TVShowDetails(Command[TVShowDetailsResult]):
    """Get the primary TV show details by id."""

    path_template: ClassVar[str] = "/tv/{tv_id}"
    output: ClassVar = TVShowDetailsResult

    tv_id: int
    language: str | None = None
