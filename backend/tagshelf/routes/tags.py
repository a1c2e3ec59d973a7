from fastapi import APIRouter, Depends, Query
from typing import List

from ..services import (
    BookmarkPersistence,
    FolderStore,
    count_tags,
    get_bookmark_persistence,
    get_folder_store,
    group_folder_tags,
    prioritise_tags,
    selected_path_for,
)
from ..schemas.organization import TagCountResponse, TagGroupResponse

router = APIRouter()


@router.get("", response_model=List[TagCountResponse])
async def get_tags(bookmarks: BookmarkPersistence = Depends(get_bookmark_persistence)):
    """Every tag in use with its bookmark count, most used first."""
    counts = count_tags(await bookmarks.list_all())
    return [TagCountResponse(tag=choice.tag, count=counts[choice.tag]) for choice in prioritise_tags(counts)]


@router.get("/groups", response_model=List[TagGroupResponse])
async def get_tag_groups(
    path: str = Query(default="/"),
    bookmarks: BookmarkPersistence = Depends(get_bookmark_persistence),
    store: FolderStore = Depends(get_folder_store),
):
    """Tag suggestions grouped by the tag groups of the folders along ``path``."""
    vocabulary = [choice.tag for choice in prioritise_tags(count_tags(await bookmarks.list_all()))]
    folder_path = selected_path_for(await store.get_root_folders(), path)
    return group_folder_tags(folder_path, vocabulary)
