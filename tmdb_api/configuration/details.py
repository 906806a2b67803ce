from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.core.command import Command


class ImagesConfiguration(BaseModel):
    base_url: str
    secure_base_url: str
    backdrop_sizes: list[str]
    logo_sizes: list[str]
    poster_sizes: list[str]
    profile_sizes: list[str]
    still_sizes: list[str]


class ConfigurationDetailsResult(BaseModel):
    images: ImagesConfiguration
    change_keys: list[str]


class ConfigurationDetails(Command[ConfigurationDetailsResult]):
    """Get the system wide configuration, mostly image base URLs and sizes."""

    path_template: ClassVar[str] = "/configuration"
    output: ClassVar = ConfigurationDetailsResult
