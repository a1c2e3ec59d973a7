from .base import BookmarkRow
from .organization import FolderRow

__all__ = [
    "BookmarkRow",
    "FolderRow",
]
