"""
Tagshelf - Visibility

Computes what a browsing client shows for a navigation state: the child
folders of the current folder and the bookmarks that belong at this level.
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .models import Bookmark
from .tree import ROOT_PATH, TagFolder, child_path, find_folder, path_segments


@dataclass(frozen=True)
class BrowseState:
    """Navigation state supplied by the client."""
    path: str = ROOT_PATH
    show_all: bool = False
    search_query: str = ""


@dataclass(frozen=True)
class FolderEntry:
    """A visible child folder and the path that opens it."""
    folder: TagFolder
    path: str


@dataclass
class BrowseResult:
    path: str
    visible_folders: List[FolderEntry] = field(default_factory=list)
    visible_bookmarks: List[Bookmark] = field(default_factory=list)
    current_folder_id: Optional[str] = None
    show_all: bool = False
    search_query: str = ""


def filter_by_path(
    bookmarks: Iterable[Bookmark],
    path_tags: Iterable[str],
    current_folder: Optional[TagFolder] = None,
) -> List[Bookmark]:
    """Bookmarks carrying every path tag.

    With a ``current_folder``, bookmarks tagged with one of its children's
    tags are dropped as well: they belong one level further down.
    """
    required = set(path_tags)
    child_tags = {child.tag for child in current_folder.children} if current_folder else set()

    visible = []
    for bookmark in bookmarks:
        tags = set(bookmark.tags)
        if child_tags & tags:
            continue
        if not required <= tags:
            continue
        visible.append(bookmark)
    return visible


def matches_query(bookmark: Bookmark, query: str) -> bool:
    """Case-insensitive substring match on title, url or description."""
    needle = query.lower()
    for value in (bookmark.title, bookmark.url, bookmark.description):
        if value and needle in value.lower():
            return True
    return False


def search_bookmarks(bookmarks: Iterable[Bookmark], query: str) -> List[Bookmark]:
    if not query:
        return list(bookmarks)
    return [bookmark for bookmark in bookmarks if matches_query(bookmark, query)]


def browse(root: TagFolder, bookmarks: Sequence[Bookmark], state: BrowseState) -> BrowseResult:
    """Visible folders and bookmarks for ``state``.

    An unresolvable path falls back to ``root`` for the folder listing. The
    path tags still apply to bookmarks, so a stale path shows only what
    carries all of its tags. Searching does not widen the scope on its own;
    callers wanting a global search pass ``show_all=True``.
    """
    current = find_folder(root, state.path) or root

    visible = filter_by_path(
        bookmarks,
        path_segments(state.path),
        None if state.show_all else current,
    )
    visible = search_bookmarks(visible, state.search_query)

    folders = sorted(current.children, key=lambda folder: folder.tag.lower())

    return BrowseResult(
        path=state.path,
        visible_folders=[FolderEntry(folder, child_path(state.path, folder.tag)) for folder in folders],
        visible_bookmarks=visible,
        current_folder_id=current.id,
        show_all=state.show_all,
        search_query=state.search_query,
    )
