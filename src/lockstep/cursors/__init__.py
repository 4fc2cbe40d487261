from .iter_cursor import IterCursor
from .stashing_cursor import (
    BidirectionalStashingCursor,
    RandomAccessStashingCursor,
    StashingCursor,
    stashing,
)
from .subscript_cursor import SubscriptCursor
from .zip_cursor import (
    BidirectionalZipCursor,
    RandomAccessZipCursor,
    ZipCursor,
    zip_cursor,
)

__all__ = [
    "BidirectionalStashingCursor",
    "BidirectionalZipCursor",
    "IterCursor",
    "RandomAccessStashingCursor",
    "RandomAccessZipCursor",
    "StashingCursor",
    "SubscriptCursor",
    "ZipCursor",
    "stashing",
    "zip_cursor",
]
