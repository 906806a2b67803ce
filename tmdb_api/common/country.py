from pydantic import BaseModel

from .types import OptionalStr


class Country(BaseModel):
    iso_3166_1: str
    name: str


class SpokenLanguage(BaseModel):
    iso_639_1: str
    name: OptionalStr = None
    english_name: str
