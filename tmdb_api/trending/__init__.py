from .list import TimeWindow, TrendingMovies, TrendingTVShows

__all__ = ["TimeWindow", "TrendingMovies", "TrendingTVShows"]
