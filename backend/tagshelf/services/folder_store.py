"""
Tagshelf - Folder Store

Owns the flat folder records (through a persistence backend) and publishes
the derived folder forest to observers after every change.
"""
import asyncio
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import AsyncIterator, Callable, List, Optional

from ..config import get_settings
from .models import Folder, new_id
from .persistence import FolderPersistence
from .tree import TagFolder, build_forest, find_folder, iter_folders, make_root, would_create_cycle

logger = logging.getLogger(__name__)

Listener = Callable[[List[TagFolder]], None]


class FolderError(str, Enum):
    NOT_FOUND = "not_found"
    HAS_CHILDREN = "has_children"
    INVALID_TAG = "invalid_tag"
    DUPLICATE_ID = "duplicate_id"
    CYCLE = "cycle"


@dataclass(frozen=True)
class FolderResult:
    """Outcome of a folder mutation."""
    folder: Optional[Folder] = None
    error: Optional[FolderError] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: FolderError, message: str) -> "FolderResult":
        return cls(error=error, message=message)


def parse_tag_groups(text: str) -> List[str]:
    """Parse the comma-separated tag group field of the folder editor."""
    return [part.strip() for part in (text or "").split(",") if part.strip()]


class FolderStore:
    """Folder records plus the forest derived from them."""

    def __init__(self, persistence: FolderPersistence, default_color: Optional[str] = None):
        self.persistence = persistence
        self.default_color = default_color or get_settings().default_folder_color
        self._listeners: List[Listener] = []

    def _normalize(self, folder: Folder) -> Folder:
        return replace(
            folder,
            tag=folder.tag.strip(),
            tag_groups=tuple(g.strip() for g in folder.tag_groups if g and g.strip()),
            color=folder.color or self.default_color,
        )

    async def create(self, folder: Folder) -> FolderResult:
        """Insert a new folder record."""
        folder = self._normalize(folder)
        if not folder.tag:
            return FolderResult.failure(FolderError.INVALID_TAG, "Folder tag must not be blank")
        records = await self.persistence.list_all()
        if any(record.id == folder.id for record in records):
            return FolderResult.failure(FolderError.DUPLICATE_ID, f"Folder {folder.id} already exists")
        # Dangling records may already point at the new id
        if would_create_cycle(records, folder.id, folder.parent):
            logger.warning(f"Rejected creating folder {folder.id} below itself ({folder.parent})")
            return FolderResult.failure(FolderError.CYCLE, "A folder cannot be its own ancestor")

        await self.persistence.insert(folder)
        logger.info(f"Created folder {folder.tag!r} ({folder.id})")
        await self._publish()
        return FolderResult(folder=folder)

    async def update(self, folder: Folder) -> FolderResult:
        """Replace an existing folder record."""
        folder = self._normalize(folder)
        if not folder.tag:
            return FolderResult.failure(FolderError.INVALID_TAG, "Folder tag must not be blank")

        records = await self.persistence.list_all()
        if not any(record.id == folder.id for record in records):
            return FolderResult.failure(FolderError.NOT_FOUND, f"Folder {folder.id} not found")
        if would_create_cycle(records, folder.id, folder.parent):
            logger.warning(f"Rejected moving folder {folder.id} under its own descendant {folder.parent}")
            return FolderResult.failure(FolderError.CYCLE, "A folder cannot be moved below itself")

        if not await self.persistence.update(folder):
            return FolderResult.failure(FolderError.NOT_FOUND, f"Folder {folder.id} not found")
        logger.info(f"Updated folder {folder.tag!r} ({folder.id})")
        await self._publish()
        return FolderResult(folder=folder)

    async def delete(self, id: str) -> FolderResult:
        """Delete a folder. Folders that still have children are kept."""
        records = await self.persistence.list_all()
        folder = next((record for record in records if record.id == id), None)
        if folder is None:
            return FolderResult.failure(FolderError.NOT_FOUND, f"Folder {id} not found")
        if any(record.parent == id for record in records):
            logger.warning(f"Rejected deleting folder {folder.tag!r} ({id}): it has children")
            return FolderResult.failure(FolderError.HAS_CHILDREN, "Cannot delete folder with children")

        await self.persistence.delete(id)
        logger.info(f"Deleted folder {folder.tag!r} ({id})")
        await self._publish()
        return FolderResult(folder=folder)

    async def get_by_id(self, id: str) -> Optional[Folder]:
        return await self.persistence.get(id)

    async def get_by_tag(self, tag: str) -> Optional[Folder]:
        """First folder carrying ``tag``."""
        for record in await self.persistence.list_all():
            if record.tag == tag:
                return record
        return None

    async def list_folders(self) -> List[Folder]:
        return await self.persistence.list_all()

    async def get_root_folders(self) -> List[TagFolder]:
        """Top-level folders with their full subtrees."""
        return build_forest(await self.persistence.list_all())

    async def get_root(self) -> TagFolder:
        """Synthetic root above :meth:`get_root_folders`."""
        return make_root(await self.get_root_folders())

    async def get_child_folders(self, id: str) -> List[TagFolder]:
        root = await self.get_root()
        for node in iter_folders(root):
            if node.id == id:
                return list(node.children)
        return []

    async def resolve_parent_id(self, parent_path: str) -> Optional[str]:
        """Id of the folder at ``parent_path``, ``None`` for the root or a miss."""
        folder = find_folder(await self.get_root(), parent_path)
        return folder.id if folder is not None else None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for forest updates; returns an unsubscribe callable.

        The listener is not called until the next change; use
        :meth:`observe_tree` for a stream that starts with the current forest.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def observe_tree(self) -> AsyncIterator[List[TagFolder]]:
        """Current forest, then a fresh forest after every change."""
        queue: asyncio.Queue = asyncio.Queue()
        unsubscribe = self.subscribe(queue.put_nowait)
        try:
            yield await self.get_root_folders()
            while True:
                yield await queue.get()
        finally:
            unsubscribe()

    async def _publish(self) -> None:
        if not self._listeners:
            return
        forest = await self.get_root_folders()
        for listener in list(self._listeners):
            try:
                listener(forest)
            except Exception:
                logger.exception(f"Folder tree listener {listener!r} failed")


# Demo hierarchy: (tag, tag groups, children)
DEMO_FOLDERS = [
    ("crochet", ["craft", "hobby"], [
        ("mittens", ["winter", "accessories"], []),
        ("scarf", ["winter", "accessories"], []),
    ]),
    ("knitting", ["craft", "hobby"], [
        ("mittens", ["winter", "accessories"], []),
        ("sweater", ["winter", "clothing"], []),
    ]),
]


async def seed_demo_folders(store: FolderStore) -> int:
    """Insert :data:`DEMO_FOLDERS`; returns the number of folders created."""
    created = 0

    async def add(entries, parent: Optional[str]) -> None:
        nonlocal created
        for tag, tag_groups, children in entries:
            result = await store.create(Folder(id=new_id(), tag=tag, parent=parent, tag_groups=tuple(tag_groups)))
            created += 1
            await add(children, result.folder.id)

    await add(DEMO_FOLDERS, None)
    return created
