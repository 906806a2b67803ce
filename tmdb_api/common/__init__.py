from .company import CompanyShort, NetworkShort
from .country import Country, SpokenLanguage
from .credits import Cast, Crew, PersonShort
from .external_ids import ExternalIds
from .genre import Genre, Keyword
from .image import Image, Logo
from .media import MovieShort, TVShowShort
from .paginated import DatedPaginatedResult, DateRange, PaginatedResult
from .review import Review, ReviewAuthor
from .video import Video, VideosResult
from .watch_provider import (
    WatchProvider,
    WatchProviderCountryResult,
    WatchProvidersResult,
)

__all__ = [
    "Cast",
    "CompanyShort",
    "Country",
    "Crew",
    "DateRange",
    "DatedPaginatedResult",
    "ExternalIds",
    "Genre",
    "Image",
    "Keyword",
    "Logo",
    "MovieShort",
    "NetworkShort",
    "PaginatedResult",
    "PersonShort",
    "Review",
    "ReviewAuthor",
    "SpokenLanguage",
    "TVShowShort",
    "Video",
    "VideosResult",
    "WatchProvider",
    "WatchProviderCountryResult",
    "WatchProvidersResult",
]
