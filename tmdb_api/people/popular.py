from typing import ClassVar

from tmdb_api.common.paginated import PaginatedResult
from tmdb_api.core.command import Command

from .search import PersonResult


class PersonPopular(Command[PaginatedResult[PersonResult]]):
    """Get people ordered by popularity."""

    path_template: ClassVar[str] = "/person/popular"
    output: ClassVar = PaginatedResult[PersonResult]

    language: str | None = None
    page: int | None = None
