from .credits import (
    PersonMovieCredits,
    PersonMovieCreditsResult,
    PersonTVCredits,
    PersonTVCreditsResult,
)
from .details import PersonDetails, PersonDetailsResult
from .external_ids import PersonExternalIds, PersonExternalIdsResult
from .images import PersonImages, PersonImagesResult
from .popular import PersonPopular
from .search import KnownForMovie, KnownForTVShow, PersonResult, PersonSearch

__all__ = [
    "KnownForMovie",
    "KnownForTVShow",
    "PersonDetails",
    "PersonDetailsResult",
    "PersonExternalIds",
    "PersonExternalIdsResult",
    "PersonImages",
    "PersonImagesResult",
    "PersonMovieCredits",
    "PersonMovieCreditsResult",
    "PersonPopular",
    "PersonResult",
    "PersonSearch",
    "PersonTVCredits",
    "PersonTVCreditsResult",
]
