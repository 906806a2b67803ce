from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.credits import PersonShort
from tmdb_api.core.command import Command


class CastRole(BaseModel):
    credit_id: str
    character: str = ""
    episode_count: int


class CrewJob(BaseModel):
    credit_id: str
    job: str
    episode_count: int


class AggregateCast(PersonShort):
    roles: list[CastRole]
    total_episode_count: int
    order: int


class AggregateCrew(PersonShort):
    jobs: list[CrewJob]
    department: str
    total_episode_count: int


class TVShowAggregateCreditsResult(BaseModel):
    id: int
    cast: list[AggregateCast]
    crew: list[AggregateCrew]


class TVShowAggregateCredits(Command[TVShowAggregateCreditsResult]):
    """Get the cast and crew of every season of a TV show, merged per person."""

    path_template: ClassVar[str] = "/tv/{tv_id}/aggregate_credits"
    output: ClassVar = TVShowAggregateCreditsResult

    tv_id: int
    language: str | None = None
