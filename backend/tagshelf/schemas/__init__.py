from .organization import (
    FolderCreate,
    FolderUpdate,
    FolderResponse,
    TagFolderResponse,
    FolderColorsResponse,
    TagCountResponse,
    TagChoiceResponse,
    TagGroupResponse,
)
from .bookmarks import BookmarkSave, BookmarkResponse, FolderEntryResponse, BrowseResponse

__all__ = [
    "FolderCreate",
    "FolderUpdate",
    "FolderResponse",
    "TagFolderResponse",
    "FolderColorsResponse",
    "TagCountResponse",
    "TagChoiceResponse",
    "TagGroupResponse",
    "BookmarkSave",
    "BookmarkResponse",
    "FolderEntryResponse",
    "BrowseResponse",
]
