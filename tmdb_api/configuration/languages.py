from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.types import OptionalStr
from tmdb_api.core.command import Command


class ConfigurationLanguage(BaseModel):
    iso_639_1: str
    english_name: str
    name: OptionalStr = None


class ConfigurationLanguages(Command[list[ConfigurationLanguage]]):
    """Get the list of languages (ISO 639-1 tags) used throughout TMDB."""

    path_template: ClassVar[str] = "/configuration/languages"
    output: ClassVar = list[ConfigurationLanguage]
