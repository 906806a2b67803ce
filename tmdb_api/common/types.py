from datetime import date, datetime
from typing import Annotated

from pydantic import BeforeValidator


def empty_as_none(v):
    """TMDB sends ``""`` where a value is unknown."""
    if v == "":
        return None
    return v


OptionalStr = Annotated[str | None, BeforeValidator(empty_as_none)]
OptionalDate = Annotated[date | None, BeforeValidator(empty_as_none)]
OptionalDateTime = Annotated[datetime | None, BeforeValidator(empty_as_none)]
