"""
Tagshelf - Bookmarks API Routes
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..schemas.bookmarks import BookmarkSave, BookmarkResponse, BrowseResponse
from ..services import (
    Bookmark,
    BookmarkPersistence,
    BrowseState,
    FolderStore,
    browse,
    get_bookmark_persistence,
    get_folder_store,
    merge_tags,
    new_id,
    parse_tag_input,
    selected_path_for,
)

logger = logging.getLogger(__name__)
router = APIRouter()


async def build_bookmark(id: str, body: BookmarkSave, store: FolderStore) -> Bookmark:
    """Bookmark with the merged tag set of a save request."""
    manual = parse_tag_input(body.tags) if isinstance(body.tags, str) else body.tags
    folder_path = selected_path_for(await store.get_root_folders(), body.path)
    return Bookmark(
        id=id,
        title=body.title,
        description=body.description,
        url=body.url,
        tags=tuple(merge_tags(
            manual,
            [folder.tag for folder in folder_path],
            body.priority_tags,
            body.folder_tags,
        )),
        image_attachment_id=body.image_attachment_id,
    )


@router.get("", response_model=List[BookmarkResponse])
async def list_bookmarks(bookmarks: BookmarkPersistence = Depends(get_bookmark_persistence)):
    return await bookmarks.list_all()


@router.get("/browse", response_model=BrowseResponse)
async def browse_bookmarks(
    path: str = Query(default="/"),
    show_all: bool = Query(default=False),
    q: Optional[str] = Query(default=None, description="Search title, url and description"),
    bookmarks: BookmarkPersistence = Depends(get_bookmark_persistence),
    store: FolderStore = Depends(get_folder_store),
):
    """Folders and bookmarks visible at ``path``."""
    state = BrowseState(path=path, show_all=show_all, search_query=q or "")
    return browse(await store.get_root(), await bookmarks.list_all(), state)


@router.get("/{id}", response_model=BookmarkResponse)
async def get_bookmark(id: str, bookmarks: BookmarkPersistence = Depends(get_bookmark_persistence)):
    bookmark = await bookmarks.get(id)
    if not bookmark:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    return bookmark


@router.post("", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(
    body: BookmarkSave,
    bookmarks: BookmarkPersistence = Depends(get_bookmark_persistence),
    store: FolderStore = Depends(get_folder_store),
):
    bookmark = await build_bookmark(new_id(), body, store)
    await bookmarks.insert(bookmark)
    logger.info(f"Saved bookmark {bookmark.id} with tags {list(bookmark.tags)}")
    return bookmark


@router.put("/{id}", response_model=BookmarkResponse)
async def update_bookmark(
    id: str,
    body: BookmarkSave,
    bookmarks: BookmarkPersistence = Depends(get_bookmark_persistence),
    store: FolderStore = Depends(get_folder_store),
):
    bookmark = await build_bookmark(id, body, store)
    if not await bookmarks.update(bookmark):
        raise HTTPException(status_code=404, detail="Bookmark not found")
    return bookmark


@router.delete("/{id}")
async def delete_bookmark(id: str, bookmarks: BookmarkPersistence = Depends(get_bookmark_persistence)):
    if not await bookmarks.delete(id):
        raise HTTPException(status_code=404, detail="Bookmark not found")
    return {"status": "success"}
