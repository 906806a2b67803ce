from pydantic import BaseModel, Field


class WatchProvider(BaseModel):
    provider_id: int
    provider_name: str
    logo_path: str | None = None
    display_priority: int = 0
    display_priorities: dict[str, int] = Field(default_factory=dict)


class WatchProviderCountryResult(BaseModel):
    """Where a title can be watched in one country."""

    link: str | None = None
    flatrate: list[WatchProvider] = Field(default_factory=list)
    rent: list[WatchProvider] = Field(default_factory=list)
    buy: list[WatchProvider] = Field(default_factory=list)
    free: list[WatchProvider] = Field(default_factory=list)
    ads: list[WatchProvider] = Field(default_factory=list)


class WatchProvidersResult(BaseModel):
    id: int
    # keyed by ISO 3166-1 country code
    results: dict[str, WatchProviderCountryResult]
