from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.core.command import Command


class ConfigurationCountry(BaseModel):
    iso_3166_1: str
    english_name: str
    native_name: str | None = None


class ConfigurationCountries(Command[list[ConfigurationCountry]]):
    """Get the list of countries (ISO 3166-1 tags) used throughout TMDB."""

    path_template: ClassVar[str] = "/configuration/countries"
    output: ClassVar = list[ConfigurationCountry]

    language: str | None = None
