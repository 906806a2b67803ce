from typing import ClassVar

from tmdb_api.common.external_ids import ExternalIds
from tmdb_api.common.types import OptionalStr
from tmdb_api.core.command import Command


class TVShowExternalIdsResult(ExternalIds):
    freebase_mid: OptionalStr = None
    freebase_id: OptionalStr = None
    tvdb_id: int | None = None
    tvrage_id: int | None = None


class TVShowExternalIds(Command[TVShowExternalIdsResult]):
    path_template: ClassVar[str] = "/tv/{tv_id}/external_ids"
    output: ClassVar = TVShowExternalIdsResult

    tv_id: int
