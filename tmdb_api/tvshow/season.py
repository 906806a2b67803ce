from typing import ClassVar

from pydantic import BaseModel, Field

from tmdb_api.common.types import OptionalDate, OptionalStr
from tmdb_api.core.command import Command

from .episode import Episode


class SeasonShort(BaseModel):
    id: int
    name: str
    overview: OptionalStr = None
    air_date: OptionalDate = None
    episode_count: int = 0
    poster_path: str | None = None
    season_number: int
    vote_average: float = 0.0


class Season(BaseModel):
    id: int
    name: str
    overview: OptionalStr = None
    air_date: OptionalDate = None
    poster_path: str | None = None
    season_number: int
    vote_average: float = 0.0
    episodes: list[Episode] = Field(default_factory=list)


class TVShowSeasonDetails(Command[Season]):
    """Get the details of a TV season, with its episodes."""

    path_template: ClassVar[str] = "/tv/{tv_id}/season/{season_number}"
    output: ClassVar = Season

    tv_id: int
    season_number: int
    language: str | None = None
