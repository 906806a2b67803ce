from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from tmdb_api.common.types import OptionalStr
from tmdb_api.core.command import Command


class CompanyAlternativeName(BaseModel):
    name: str
    kind: OptionalStr = Field(default=None, alias="type")

    model_config = ConfigDict(populate_by_name=True)


class CompanyAlternativeNamesResult(BaseModel):
    id: int
    results: list[CompanyAlternativeName]


class CompanyAlternativeNames(Command[CompanyAlternativeNamesResult]):
    """Get the alternative names of a company."""

    path_template: ClassVar[str] = "/company/{company_id}/alternative_names"
    output: ClassVar = CompanyAlternativeNamesResult

    company_id: int
