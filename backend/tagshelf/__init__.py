"""
Tagshelf - App Module
"""
from .config import get_settings, Settings
from .database import init_db, Base
from .models import BookmarkRow, FolderRow

__all__ = [
    # Config
    "get_settings",
    "Settings",

    # Database
    "init_db",

    # Models
    "Base",
    "BookmarkRow",
    "FolderRow",
]
