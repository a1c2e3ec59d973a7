"""
Tagshelf - Persistence

Storage backends for folder and bookmark records. Every backend speaks in
the frozen :mod:`.models` value types; ORM rows never leave this module.
"""
from typing import Dict, List, Optional, Protocol

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..models import BookmarkRow, FolderRow
from .models import Bookmark, Folder


class FolderPersistence(Protocol):
    async def list_all(self) -> List[Folder]: ...

    async def get(self, id: str) -> Optional[Folder]: ...

    async def insert(self, folder: Folder) -> None: ...

    async def update(self, folder: Folder) -> bool: ...

    async def delete(self, id: str) -> bool: ...


class BookmarkPersistence(Protocol):
    async def list_all(self) -> List[Bookmark]: ...

    async def get(self, id: str) -> Optional[Bookmark]: ...

    async def insert(self, bookmark: Bookmark) -> None: ...

    async def update(self, bookmark: Bookmark) -> bool: ...

    async def delete(self, id: str) -> bool: ...


class _MemoryTable:
    """Insertion-ordered dict of frozen records keyed by id."""

    def __init__(self, records=()):
        self._records: Dict[str, object] = {}
        for record in records:
            self._records[record.id] = record

    async def list_all(self):
        return list(self._records.values())

    async def get(self, id):
        return self._records.get(id)

    async def insert(self, record) -> None:
        self._records[record.id] = record

    async def update(self, record) -> bool:
        if record.id not in self._records:
            return False
        self._records[record.id] = record
        return True

    async def delete(self, id) -> bool:
        return self._records.pop(id, None) is not None


class MemoryFolderPersistence(_MemoryTable):
    """In-memory folder table."""


class MemoryBookmarkPersistence(_MemoryTable):
    """In-memory bookmark table."""


def _folder_from_row(row: FolderRow) -> Folder:
    return Folder(
        id=row.id,
        tag=row.tag,
        parent=row.parent_id,
        tag_groups=tuple(row.tag_groups or ()),
        color=row.color,
    )


def _bookmark_from_row(row: BookmarkRow) -> Bookmark:
    return Bookmark(
        id=row.id,
        title=row.title or "",
        description=row.description or "",
        url=row.url,
        tags=tuple(row.tags or ()),
        image_attachment_id=row.image_attachment_id,
    )


class SqlFolderPersistence:
    """Folder table backed by SQLAlchemy, one session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def list_all(self) -> List[Folder]:
        async with self.session_factory() as db:
            result = await db.execute(select(FolderRow).order_by(FolderRow.created_at, FolderRow.id))
            return [_folder_from_row(row) for row in result.scalars().all()]

    async def get(self, id: str) -> Optional[Folder]:
        async with self.session_factory() as db:
            row = await db.get(FolderRow, id)
            return _folder_from_row(row) if row else None

    async def insert(self, folder: Folder) -> None:
        async with self.session_factory() as db:
            db.add(FolderRow(
                id=folder.id,
                tag=folder.tag,
                parent_id=folder.parent,
                tag_groups=list(folder.tag_groups),
                color=folder.color,
            ))
            await db.commit()

    async def update(self, folder: Folder) -> bool:
        async with self.session_factory() as db:
            row = await db.get(FolderRow, folder.id)
            if row is None:
                return False
            row.tag = folder.tag
            row.parent_id = folder.parent
            row.tag_groups = list(folder.tag_groups)
            row.color = folder.color
            await db.commit()
            return True

    async def delete(self, id: str) -> bool:
        async with self.session_factory() as db:
            result = await db.execute(delete(FolderRow).where(FolderRow.id == id))
            await db.commit()
            return result.rowcount > 0


class SqlBookmarkPersistence:
    """Bookmark table backed by SQLAlchemy, one session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def list_all(self) -> List[Bookmark]:
        async with self.session_factory() as db:
            result = await db.execute(select(BookmarkRow).order_by(BookmarkRow.created_at, BookmarkRow.id))
            return [_bookmark_from_row(row) for row in result.scalars().all()]

    async def get(self, id: str) -> Optional[Bookmark]:
        async with self.session_factory() as db:
            row = await db.get(BookmarkRow, id)
            return _bookmark_from_row(row) if row else None

    async def insert(self, bookmark: Bookmark) -> None:
        async with self.session_factory() as db:
            db.add(BookmarkRow(
                id=bookmark.id,
                title=bookmark.title,
                description=bookmark.description,
                url=bookmark.url,
                tags=list(bookmark.tags),
                image_attachment_id=bookmark.image_attachment_id,
            ))
            await db.commit()

    async def update(self, bookmark: Bookmark) -> bool:
        async with self.session_factory() as db:
            row = await db.get(BookmarkRow, bookmark.id)
            if row is None:
                return False
            row.title = bookmark.title
            row.description = bookmark.description
            row.url = bookmark.url
            row.tags = list(bookmark.tags)
            row.image_attachment_id = bookmark.image_attachment_id
            await db.commit()
            return True

    async def delete(self, id: str) -> bool:
        async with self.session_factory() as db:
            result = await db.execute(delete(BookmarkRow).where(BookmarkRow.id == id))
            await db.commit()
            return result.rowcount > 0
