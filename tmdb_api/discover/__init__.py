from .movie import MovieDiscover
from .tv import TVShowDiscover

__all__ = ["MovieDiscover", "TVShowDiscover"]
