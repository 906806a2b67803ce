"""Lists of ids changed in the last 24 hours, or in a given window of at
most 14 days."""

from datetime import date
from typing import ClassVar

from pydantic import BaseModel, field_validator

from tmdb_api.common.paginated import PaginatedResult
from tmdb_api.core.command import Command


class Change(BaseModel):
    id: int
    adult: bool = False

    @field_validator("adult", mode="before")
    @classmethod
    def parse_adult(cls, v):
        if v is None:
            return False
        return v


class _ChangeList(Command[PaginatedResult[Change]]):
    output: ClassVar = PaginatedResult[Change]

    start_date: date | None = None
    end_date: date | None = None
    page: int | None = None


class MovieChanges(_ChangeList):
    path_template: ClassVar[str] = "/movie/changes"


class PersonChanges(_ChangeList):
    path_template: ClassVar[str] = "/person/changes"


class TVShowChanges(_ChangeList):
    path_template: ClassVar[str] = "/tv/changes"
