"""
Tagshelf - Routes Module
"""
from .folders import router as folders_router
from .bookmarks import router as bookmarks_router
from .tags import router as tags_router

__all__ = [
    "folders_router",
    "bookmarks_router",
    "tags_router",
]
