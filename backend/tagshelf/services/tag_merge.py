"""
Tagshelf - Tag merge

Final tag list of a saved bookmark.
"""
from typing import Iterable, List


def parse_tag_input(text: str) -> List[str]:
    """Split the free-text tag field on commas."""
    return [part.strip() for part in (text or "").split(",") if part.strip()]


def merge_tags(
    manual: Iterable[str] = (),
    path_tags: Iterable[str] = (),
    priority_tags: Iterable[str] = (),
    folder_tags: Iterable[str] = (),
) -> List[str]:
    """Union of all tag sources in that order.

    Entries are stripped, blanks dropped, and the first occurrence of each
    tag decides its position.
    """
    merged = {}
    for source in (manual, path_tags, priority_tags, folder_tags):
        for tag in source:
            tag = (tag or "").strip()
            if tag:
                merged.setdefault(tag, None)
    return list(merged)
