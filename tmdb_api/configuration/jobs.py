from typing import ClassVar

from pydantic import BaseModel

from tmdb_api.core.command import Command


class Department(BaseModel):
    department: str
    jobs: list[str]


class ConfigurationJobs(Command[list[Department]]):
    """Get the list of jobs and departments used on TMDB."""

    path_template: ClassVar[str] = "/configuration/jobs"
    output: ClassVar = list[Department]
