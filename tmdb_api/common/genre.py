from pydantic import BaseModel


class Genre(BaseModel):
    id: int
    name: str


class Keyword(BaseModel):
    id: int
    name: str
