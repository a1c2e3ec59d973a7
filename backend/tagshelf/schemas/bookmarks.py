from pydantic import BaseModel
from typing import List, Optional, Union

from .organization import TagFolderResponse


class BookmarkSave(BaseModel):
    title: str = ""
    description: str = ""
    url: Optional[str] = None
    # Typed tags: comma-separated text or a list
    tags: Union[str, List[str]] = []
    # Folder the bookmark is saved from; its folder tags are added
    path: Optional[str] = None
    priority_tags: List[str] = []
    folder_tags: List[str] = []
    image_attachment_id: Optional[str] = None


class BookmarkResponse(BaseModel):
    id: str
    title: str
    description: str
    url: Optional[str] = None
    tags: List[str]
    image_attachment_id: Optional[str] = None

    class Config:
        from_attributes = True


class FolderEntryResponse(BaseModel):
    folder: TagFolderResponse
    path: str

    class Config:
        from_attributes = True


class BrowseResponse(BaseModel):
    path: str
    show_all: bool
    search_query: str
    current_folder_id: Optional[str] = None
    visible_folders: List[FolderEntryResponse]
    visible_bookmarks: List[BookmarkResponse]

    class Config:
        from_attributes = True
