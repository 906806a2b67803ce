from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.core.command import Command


class Timezone(BaseModel):
    iso_3166_1: str
    zones: list[str]


class ConfigurationTimezones(Command[list[Timezone]]):
    path_template: ClassVar[str] = "/configuration/timezones"
    output: ClassVar = list[Timezone]
