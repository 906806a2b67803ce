from typing import ClassVar

from tmdb_api.core.command import Command


class ConfigurationPrimaryTranslations(Command[list[str]]):
    """Get the officially supported translations, as ``xx-YY`` tags."""

    path_template: ClassVar[str] = "/configuration/primary_translations"
    output: ClassVar = list[str]
