from .details import CollectionDetails, CollectionDetailsResult
from .images import CollectionImages, CollectionImagesResult

__all__ = [
    "CollectionDetails",
    "CollectionDetailsResult",
    "CollectionImages",
    "CollectionImagesResult",
]
