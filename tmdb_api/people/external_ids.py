from typing import ClassVar

from tmdb_api.common.external_ids import ExternalIds
from tmdb_api.common.types import OptionalStr
from tmdb_api.core.command import Command


class PersonExternalIdsResult(ExternalIds):
    tiktok_id: OptionalStr = None
    youtube_id: OptionalStr = None
    tvrage_id: int | None = None


class PersonExternalIds(Command[PersonExternalIdsResult]):
    path_template: ClassVar[str] = "/person/{person_id}/external_ids"
    output: ClassVar = PersonExternalIdsResult

    person_id: int
