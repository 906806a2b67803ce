"""Shared contract of every endpoint binding.

A command is a pydantic model whose fields are the request parameters. The
class declares a ``path_template`` such as ``"/movie/{movie_id}/images"``;
fields named in the template fill the path, every other non-``None`` field
is sent in the query string under its alias.
"""

from __future__ import annotations

from string import Formatter
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from .client import Client

OutputT = TypeVar("OutputT")


def format_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(format_param(item) for item in value)
    return str(value)


class Command(BaseModel, Generic[OutputT]):
    path_template: ClassVar[str]
    output: ClassVar[Any]

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @classmethod
    def path_fields(cls) -> set[str]:
        return {
            name
            for _, name, _, _ in Formatter().parse(cls.path_template)
            if name
        }

    def path(self) -> str:
        values = self.model_dump(mode="json", include=self.path_fields())
        return self.path_template.format(**values)

    def params(self) -> list[tuple[str, str]]:
        data = self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude=self.path_fields(),
        )
        return [(key, format_param(value)) for key, value in data.items()]

    async def execute(self, client: Client) -> OutputT:
        return await client.execute(self)
