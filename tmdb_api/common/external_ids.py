from pydantic import BaseModel

from .types import OptionalStr


class ExternalIds(BaseModel):
    id: int
    imdb_id: OptionalStr = None
    wikidata_id: OptionalStr = None
    facebook_id: OptionalStr = None
    instagram_id: OptionalStr = None
    twitter_id: OptionalStr = None
