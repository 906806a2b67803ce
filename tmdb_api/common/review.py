from datetime import datetime

from pydantic import BaseModel

from .types import OptionalStr


class ReviewAuthor(BaseModel):
    name: OptionalStr = None
    username: str
    avatar_path: str | None = None
    rating: float | None = None


class Review(BaseModel):
    id: str
    author: str
    author_details: ReviewAuthor
    content: str
    created_at: datetime
    updated_at: datetime
    url: str
