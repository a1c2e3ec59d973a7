"""
Tagshelf - Folder tree

Folders are persisted as flat parent-pointer records. The tree handed to
the rest of the app is derived from them on every change and never patched
in place.

A path names a location by folder tags, e.g. ``/knitting/mittens``. Both
``""`` and ``"/"`` denote the synthetic root whose children are the
top-level folders.
"""
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .models import DEFAULT_FOLDER_COLOR, Folder


ROOT_PATH = "/"


@dataclass(frozen=True)
class TagFolder:
    """Immutable tree node derived from a :class:`Folder` record."""
    id: Optional[str]
    tag: str
    children: Tuple["TagFolder", ...] = ()
    is_root: bool = False
    tag_groups: Tuple[str, ...] = ()
    color: str = DEFAULT_FOLDER_COLOR

    @property
    def is_synthetic(self) -> bool:
        """True for the super-root made by :func:`make_root`."""
        return self.id is None

    def find_folder(self, path: str) -> Optional["TagFolder"]:
        return find_folder(self, path)

    def find_folders(self, path: str) -> List["TagFolder"]:
        return find_folders(self, path)


def path_segments(path: str) -> List[str]:
    """Non-empty segments of a path."""
    return [segment for segment in (path or "").split("/") if segment]


def child_path(path: str, tag: str) -> str:
    """Path that opens the child folder ``tag`` of ``path``."""
    return ROOT_PATH + "/".join(path_segments(path) + [tag])


def parent_path(path: str) -> str:
    """Path one level up; the root is its own parent."""
    return ROOT_PATH + "/".join(path_segments(path)[:-1])


def _walk(root: TagFolder, segments: Sequence[str]) -> Optional[List[TagFolder]]:
    # First structural match at each level, no backtracking
    walked = []
    current = root
    for segment in segments:
        current = next((child for child in current.children if child.tag == segment), None)
        if current is None:
            return None
        walked.append(current)
    return walked


def find_folder(root: TagFolder, path: str) -> Optional[TagFolder]:
    """Resolve ``path`` below ``root``.

    Returns ``root`` itself for the root path and ``None`` when any segment
    has no matching child.
    """
    walked = _walk(root, path_segments(path))
    if walked is None:
        return None
    return walked[-1] if walked else root


def find_folders(root: TagFolder, path: str) -> List[TagFolder]:
    """Folders walked to resolve ``path``, deepest first.

    ``root`` itself is never included. The root path and unresolvable paths
    both give an empty list.
    """
    walked = _walk(root, path_segments(path))
    if not walked:
        return []
    walked.reverse()
    return walked


def iter_folders(node: TagFolder) -> Iterator[TagFolder]:
    """Depth-first, pre-order traversal including ``node``."""
    yield node
    for child in node.children:
        yield from iter_folders(child)


def make_root(forest: Iterable[TagFolder]) -> TagFolder:
    """Synthetic super-root over the top-level folders."""
    return TagFolder(id=None, tag=ROOT_PATH, children=tuple(forest), is_root=True)


def build_forest(records: Iterable[Folder]) -> List[TagFolder]:
    """Build the folder forest from flat records.

    Always succeeds:

    * a record whose parent is ``None`` or unknown becomes a root;
    * a parent cycle is broken at the first record (in input order) found
      on it, which becomes a root;
    * a repeated id keeps its first record.

    Roots and children keep the input order of their records.
    """
    by_id: Dict[str, Folder] = {}
    for record in records:
        by_id.setdefault(record.id, record)

    children: Dict[str, List[Folder]] = defaultdict(list)
    roots = []
    for record in by_id.values():
        if record.parent is None or record.parent not in by_id:
            roots.append(record)
        else:
            children[record.parent].append(record)

    placed = set()

    def attach(record: Folder, is_root: bool) -> TagFolder:
        placed.add(record.id)
        nodes = []
        for child in children[record.id]:
            if child.id not in placed:
                nodes.append(attach(child, False))
        return TagFolder(
            id=record.id,
            tag=record.tag,
            children=tuple(nodes),
            is_root=is_root,
            tag_groups=tuple(record.tag_groups),
            color=record.color,
        )

    forest = [attach(record, True) for record in roots]

    # Whatever is left hangs off a parent cycle
    for record in by_id.values():
        if record.id in placed:
            continue
        seen = set()
        node = record
        while node.id not in seen:
            seen.add(node.id)
            node = by_id[node.parent]
        forest.append(attach(node, True))

    return forest


def would_create_cycle(records: Iterable[Folder], folder_id: str, parent_id: Optional[str]) -> bool:
    """True if re-parenting ``folder_id`` under ``parent_id`` closes a loop."""
    parents = {record.id: record.parent for record in records}
    seen = set()
    current = parent_id
    while current is not None and current not in seen:
        if current == folder_id:
            return True
        seen.add(current)
        current = parents.get(current)
    return False
