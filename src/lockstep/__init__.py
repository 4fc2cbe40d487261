from .capabilities import (
    CapabilityError,
    Capabilities,
    Category,
    Promotion,
    promotion_of,
)
from .cursors import IterCursor, SubscriptCursor, ZipCursor, stashing, zip_cursor
from .ranges import CountingRange, ForwardList
from .zip_view import IndexedZip, SizedZip, Zip, ZipDataset, zip_view

__all__ = [
    "CapabilityError",
    "Capabilities",
    "Category",
    "CountingRange",
    "ForwardList",
    "IndexedZip",
    "IterCursor",
    "Promotion",
    "SizedZip",
    "SubscriptCursor",
    "Zip",
    "ZipCursor",
    "ZipDataset",
    "promotion_of",
    "stashing",
    "zip_cursor",
    "zip_view",
]
