from .list import WatchProviderListResult, WatchProviderMovieList, WatchProviderTVList
from .regions import (
    WatchProviderRegion,
    WatchProviderRegions,
    WatchProviderRegionsResult,
)

__all__ = [
    "WatchProviderListResult",
    "WatchProviderMovieList",
    "WatchProviderRegion",
    "WatchProviderRegions",
    "WatchProviderRegionsResult",
    "WatchProviderTVList",
]
