from .list import GenresResult, MovieGenres, TVShowGenres

__all__ = ["GenresResult", "MovieGenres", "TVShowGenres"]
