from .alternative_names import CompanyAlternativeNames, CompanyAlternativeNamesResult
from .details import CompanyDetails, CompanyDetailsResult
from .images import CompanyImages, CompanyImagesResult

__all__ = [
    "CompanyAlternativeNames",
    "CompanyAlternativeNamesResult",
    "CompanyDetails",
    "CompanyDetailsResult",
    "CompanyImages",
    "CompanyImagesResult",
]
