from pydantic import BaseModel

from .types import OptionalStr


class CompanyShort(BaseModel):
    id: int
    name: str
    logo_path: str | None = None
    origin_country: OptionalStr = None


class NetworkShort(BaseModel):
    id: int
    name: str
    logo_path: str | None = None
    origin_country: OptionalStr = None
