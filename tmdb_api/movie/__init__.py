from .alternative_titles import MovieAlternativeTitles, MovieAlternativeTitlesResult
from .credits import MovieCredits, MovieCreditsResult
from .details import MovieDetails, MovieDetailsResult, MovieStatus
from .external_ids import MovieExternalIds
from .images import MovieImages, MovieImagesResult
from .keywords import MovieKeywords, MovieKeywordsResult
from .latest import MovieLatest
from .lists import MovieNowPlaying, MoviePopular, MovieTopRated, MovieUpcoming
from .recommendations import MovieRecommendations, MovieSimilar
from .release_dates import MovieReleaseDates, MovieReleaseDatesResult, ReleaseType
from .reviews import MovieReviews, MovieReviewsResult
from .search import MovieSearch
from .translations import MovieTranslations, MovieTranslationsResult
from .videos import MovieVideos
from .watch_providers import MovieWatchProviders

__all__ = [
    "MovieAlternativeTitles",
    "MovieAlternativeTitlesResult",
    "MovieCredits",
    "MovieCreditsResult",
    "MovieDetails",
    "MovieDetailsResult",
    "MovieExternalIds",
    "MovieImages",
    "MovieImagesResult",
    "MovieKeywords",
    "MovieKeywordsResult",
    "MovieLatest",
    "MovieNowPlaying",
    "MoviePopular",
    "MovieRecommendations",
    "MovieReleaseDates",
    "MovieReleaseDatesResult",
    "MovieReviews",
    "MovieReviewsResult",
    "MovieSearch",
    "MovieSimilar",
    "MovieStatus",
    "MovieTopRated",
    "MovieTranslations",
    "MovieTranslationsResult",
    "MovieUpcoming",
    "MovieVideos",
    "MovieWatchProviders",
    "ReleaseType",
]
