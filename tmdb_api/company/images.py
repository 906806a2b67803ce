from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.common.image import Logo
from tmdb_api.core.command import Command


class CompanyImagesResult(BaseModel):
    id: int
    logos: list[Logo]


class CompanyImages(Command[CompanyImagesResult]):
    """Get the logos of a company, SVG and PNG."""

    path_template: ClassVar[str] = "/company/{company_id}/images"
    output: ClassVar = CompanyImagesResult

    company_id: int
