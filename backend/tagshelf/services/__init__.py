"""
Tagshelf - Services Module
"""
from ..database import AsyncSessionLocal
from .models import FOLDER_COLORS, Bookmark, Folder, new_id
from .tree import (
    TagFolder,
    build_forest,
    child_path,
    find_folder,
    find_folders,
    make_root,
    parent_path,
)
from .persistence import (
    BookmarkPersistence,
    FolderPersistence,
    MemoryBookmarkPersistence,
    MemoryFolderPersistence,
    SqlBookmarkPersistence,
    SqlFolderPersistence,
)
from .folder_store import FolderError, FolderResult, FolderStore, parse_tag_groups, seed_demo_folders
from .visibility import BrowseResult, BrowseState, FolderEntry, browse
from .tag_grouping import TagChoice, TagGroup, count_tags, group_folder_tags, prioritise_tags
from .tag_merge import merge_tags, parse_tag_input
from .editor import BookmarkEditor, selected_path_for

# Singleton instances
folder_store = FolderStore(SqlFolderPersistence(AsyncSessionLocal))
bookmark_persistence = SqlBookmarkPersistence(AsyncSessionLocal)


def get_folder_store() -> FolderStore:
    return folder_store


def get_bookmark_persistence() -> BookmarkPersistence:
    return bookmark_persistence


__all__ = [
    # Models
    "FOLDER_COLORS",
    "Bookmark",
    "Folder",
    "new_id",

    # Tree
    "TagFolder",
    "build_forest",
    "child_path",
    "find_folder",
    "find_folders",
    "make_root",
    "parent_path",

    # Persistence
    "BookmarkPersistence",
    "FolderPersistence",
    "MemoryBookmarkPersistence",
    "MemoryFolderPersistence",
    "SqlBookmarkPersistence",
    "SqlFolderPersistence",

    # Folder Store
    "FolderError",
    "FolderResult",
    "FolderStore",
    "parse_tag_groups",
    "seed_demo_folders",
    "folder_store",
    "get_folder_store",

    # Visibility
    "BrowseResult",
    "BrowseState",
    "FolderEntry",
    "browse",

    # Tags
    "TagChoice",
    "TagGroup",
    "count_tags",
    "group_folder_tags",
    "prioritise_tags",
    "merge_tags",
    "parse_tag_input",

    # Editor
    "BookmarkEditor",
    "selected_path_for",

    "bookmark_persistence",
    "get_bookmark_persistence",
]
