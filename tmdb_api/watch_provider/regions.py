from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.core.command import Command


class WatchProviderRegion(BaseModel):
    iso_3166_1: str
    english_name: str
    native_name: str | None = None


class WatchProviderRegionsResult(BaseModel):
    results: list[WatchProviderRegion]


class WatchProviderRegions(Command[WatchProviderRegionsResult]):
    """Get the countries that have watch provider data."""

    path_template: ClassVar[str] = "/watch/providers/regions"
    output: ClassVar = WatchProviderRegionsResult

    language: str | None = None
