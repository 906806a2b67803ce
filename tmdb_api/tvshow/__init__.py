from .aggregate_credits import TVShowAggregateCredits, TVShowAggregateCreditsResult
from .content_ratings import TVShowContentRatings, TVShowContentRatingsResult
from .details import TVShowDetails, TVShowDetailsResult
from .episode import Episode, EpisodeShort, TVShowEpisodeDetails
from .external_ids import TVShowExternalIds, TVShowExternalIdsResult
from .images import TVShowImages, TVShowImagesResult
from .keywords import TVShowKeywords, TVShowKeywordsResult
from .lists import TVShowAiringToday, TVShowOnTheAir, TVShowPopular, TVShowTopRated
from .recommendations import TVShowRecommendations, TVShowSimilar
from .search import TVShowSearch
from .season import Season, SeasonShort, TVShowSeasonDetails
from .videos import TVShowVideos
from .watch_providers import TVShowWatchProviders

__all__ = [
    "Episode",
    "EpisodeShort",
    "Season",
    "SeasonShort",
    "TVShowAggregateCredits",
    "TVShowAggregateCreditsResult",
    "TVShowAiringToday",
    "TVShowContentRatings",
    "TVShowContentRatingsResult",
    "TVShowDetails",
    "TVShowDetailsResult",
    "TVShowEpisodeDetails",
    "TVShowExternalIds",
    "TVShowExternalIdsResult",
    "TVShowImages",
    "TVShowImagesResult",
    "TVShowKeywords",
    "TVShowKeywordsResult",
    "TVShowOnTheAir",
    "TVShowPopular",
    "TVShowRecommendations",
    "TVShowSearch",
    "TVShowSeasonDetails",
    "TVShowSimilar",
    "TVShowTopRated",
    "TVShowVideos",
    "TVShowWatchProviders",
]
