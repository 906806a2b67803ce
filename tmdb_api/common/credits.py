from pydantic import BaseModel

from .types import OptionalStr


class PersonShort(BaseModel):
    id: int
    name: str
    original_name: str | None = None
    adult: bool = False
    gender: int | None = None  # 0 not set, 1 female, 2 male, 3 non-binary
    known_for_department: OptionalStr = None
    popularity: float = 0.0
    profile_path: str | None = None


class Cast(PersonShort):
    cast_id: int | None = None
    character: str = ""
    credit_id: str
    order: int


class Crew(PersonShort):
    credit_id: str
    department: str
    job: str
