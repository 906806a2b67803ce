from datetime import date
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PaginatedResult(BaseModel, Generic[T]):
    page: int
    total_pages: int
    total_results: int
    results: list[T]


class DateRange(BaseModel):
    minimum: date
    maximum: date


class DatedPaginatedResult(PaginatedResult[T], Generic[T]):
    dates: DateRange
