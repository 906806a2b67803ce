from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.types import OptionalStr
from tmdb_api.core.command import Command


class ParentCompany(BaseModel):
    id: int
    name: str
    logo_path: str | None = None


class CompanyDetailsResult(BaseModel):
    id: int
    name: str
    description: OptionalStr = None
    headquarters: OptionalStr = None
    homepage: OptionalStr = None
    logo_path: str | None = None
    origin_country: OptionalStr = None
    parent_company: ParentCompany | None = None


class CompanyDetails(Command[CompanyDetailsResult]):
    """Get the details of a company by id."""

    path_template: ClassVar[str] = "/company/{company_id}"
    output: ClassVar = CompanyDetailsResult

    company_id: int
