"""Plain value types shared by the folder and bookmark services."""
from dataclasses import dataclass
from typing import Optional, Tuple
from uuid import uuid4

from ..config import DEFAULT_FOLDER_COLOR


# Palette offered by the folder editor
FOLDER_COLORS = (
    "ffe9be11",
    "ff9d4379",
    "ff3475a4",
    "ff834c7a",
    DEFAULT_FOLDER_COLOR,
    "ff2b7356",
    "ffedd669",
    "ffbf789e",
    "ff819b55",
)


def new_id() -> str:
    return str(uuid4())


@dataclass(frozen=True)
class Folder:
    """Flat, persisted folder record."""
    id: str
    tag: str
    parent: Optional[str] = None
    tag_groups: Tuple[str, ...] = ()
    color: str = DEFAULT_FOLDER_COLOR


@dataclass(frozen=True)
class Bookmark:
    """Saved link or note."""
    id: str
    title: str = ""
    description: str = ""
    url: Optional[str] = None
    tags: Tuple[str, ...] = ()
    image_attachment_id: Optional[str] = None
