from typing import ClassVar

from pydantic import BaseModel, Field

from tmdb_api.common.credits import Cast, Crew
from tmdb_api.common.types import OptionalDate, OptionalStr
from tmdb_api.core.command import Command


class EpisodeShort(BaseModel):
    id: int
    name: str
    overview: OptionalStr = None
    air_date: OptionalDate = None
    episode_number: int
    episode_type: OptionalStr = None  # "standard", "finale", ...
    season_number: int
    show_id: int | None = None
    production_code: OptionalStr = None
    runtime: int | None = None
    still_path: str | None = None
    vote_average: float = 0.0
    vote_count: int = 0


class Episode(EpisodeShort):
    crew: list[Crew] = Field(default_factory=list)
    guest_stars: list[Cast] = Field(default_factory=list)


class TVShowEpisodeDetails(Command[Episode]):
    """Get the details of a TV episode."""

    path_template: ClassVar[str] = (
        "/tv/{tv_id}/season/{season_number}/episode/{episode_number}"
    )
    output: ClassVar = Episode

    tv_id: int
    season_number: int
    episode_number: int
    language: str | None = None
