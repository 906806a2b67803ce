from .countries import ConfigurationCountries, ConfigurationCountry
from .details import (
    ConfigurationDetails,
    ConfigurationDetailsResult,
    ImagesConfiguration,
)
from .jobs import ConfigurationJobs, Department
from .languages import ConfigurationLanguage, ConfigurationLanguages
from .primary_translations import ConfigurationPrimaryTranslations
from .timezones import ConfigurationTimezones, Timezone

__all__ = [
    "ConfigurationCountries",
    "ConfigurationCountry",
    "ConfigurationDetails",
    "ConfigurationDetailsResult",
    "ConfigurationJobs",
    "ConfigurationLanguage",
    "ConfigurationLanguages",
    "ConfigurationPrimaryTranslations",
    "ConfigurationTimezones",
    "Department",
    "ImagesConfiguration",
    "Timezone",
]
