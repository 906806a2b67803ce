from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.core.command import Command


class Certification(BaseModel):
    certification: str
    meaning: str
    order: int


class CertificationsResult(BaseModel):
    # keyed by ISO 3166-1 country code
    certifications: dict[str, list[Certification]]


class MovieCertifications(Command[CertificationsResult]):
    """Get the officially supported movie certifications."""

    path_template: ClassVar[str] = "/certification/movie/list"
    output: ClassVar = CertificationsResult


class TVShowCertifications(Command[CertificationsResult]):
    """Get the officially supported TV show certifications."""

    path_template: ClassVar[str] = "/certification/tv/list"
    output: ClassVar = CertificationsResult
