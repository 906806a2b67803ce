from typing import ClassVar

from tmdb_api.common.external_ids import ExternalIds
from tmdb_api.core.command import Command


class MovieExternalIds(Command[ExternalIds]):
    """Get the ids of a movie on IMDb, Wikidata, Facebook, Instagram and Twitter."""

    path_template: ClassVar[str] = "/movie/{movie_id}/external_ids"
    output: ClassVar = ExternalIds

    movie_id: int
