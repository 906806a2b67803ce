from .list import Change, MovieChanges, PersonChanges, TVShowChanges

__all__ = ["Change", "MovieChanges", "PersonChanges", "TVShowChanges"]
